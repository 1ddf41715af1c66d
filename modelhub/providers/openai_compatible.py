"""OpenAI-compatible model handles — any service speaking the chat completions API."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx
import openai

from modelhub.models import ModelResponse, ToolCall, ToolDef, TokenUsage

logger = logging.getLogger(__name__)


class OpenAICompatibleModel:
    """A model handle bound to one identifier, base URL and API key.

    Building the handle does not touch the network; the first request happens
    on ``generate``.
    """

    def __init__(
        self,
        model: str,
        base_url: str,
        api_key: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.model = model
        self.base_url = base_url
        self._api_key = api_key
        self.client = openai.AsyncOpenAI(base_url=base_url, api_key=api_key, http_client=http_client)

    @property
    def api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return f"OpenAICompatibleModel(model={self.model!r}, base_url={self.base_url!r})"

    def format_tools(self, tools: list[ToolDef]) -> list[dict]:
        return [
            {
                "type": "function",
                "function": {
                    "name": t.name,
                    "description": t.description,
                    "parameters": t.parameters,
                },
            }
            for t in tools
        ]

    async def generate(
        self,
        messages: list[dict],
        tools: list[ToolDef] | None = None,
        system: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 4096,
    ) -> ModelResponse:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": self._format_messages(messages, system),
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if tools:
            kwargs["tools"] = self.format_tools(tools)

        try:
            raw = await self.client.chat.completions.create(**kwargs)
        except openai.APIError as e:
            logger.error(f"{self.base_url} API error for {self.model}: {e}")
            raise

        return self._parse_response(raw)

    def count_tokens(self, messages: list[dict]) -> int:
        # Rough estimate: 4 chars per token
        total = sum(len(json.dumps(m)) for m in messages)
        return total // 4

    def _format_messages(self, messages: list[dict], system: str | None = None) -> list[dict]:
        formatted = []
        if system:
            formatted.append({"role": "system", "content": system})

        for msg in messages:
            role = msg.get("role", "user")
            if role == "system":
                formatted.append({"role": "system", "content": msg.get("content", "")})
            elif role == "tool":
                formatted.append({
                    "role": "tool",
                    "tool_call_id": msg.get("tool_call_id", msg.get("id", "unknown")),
                    "content": str(msg.get("content", "")),
                })
            elif role == "assistant":
                entry: dict[str, Any] = {"role": "assistant"}
                content = msg.get("content", "")
                if content:
                    entry["content"] = content
                tool_calls = msg.get("tool_calls", [])
                if tool_calls:
                    entry["tool_calls"] = [
                        {
                            "id": tc.get("id", "unknown"),
                            "type": "function",
                            "function": {
                                "name": tc.get("name", ""),
                                "arguments": json.dumps(tc.get("args", {})),
                            },
                        }
                        for tc in tool_calls
                    ]
                formatted.append(entry)
            else:
                formatted.append({"role": "user", "content": str(msg.get("content", ""))})
        return formatted

    def _parse_response(self, raw: Any) -> ModelResponse:
        msg = raw.choices[0].message
        tool_calls = []
        if msg.tool_calls:
            for tc in msg.tool_calls:
                tool_calls.append(
                    ToolCall(
                        name=tc.function.name,
                        args=json.loads(tc.function.arguments or "{}"),
                        id=tc.id,
                    )
                )
        usage = TokenUsage()
        if raw.usage:
            usage = TokenUsage(raw.usage.prompt_tokens, raw.usage.completion_tokens)
        return ModelResponse(text=msg.content, tool_calls=tool_calls, usage=usage, raw=raw)


def create_openai(
    base_url: str,
    api_key: str,
    http_client: httpx.AsyncClient | None = None,
) -> Callable[[str], OpenAICompatibleModel]:
    """Return a factory that binds model identifiers to this base URL and key."""

    def build(model: str) -> OpenAICompatibleModel:
        return OpenAICompatibleModel(model=model, base_url=base_url, api_key=api_key, http_client=http_client)

    return build
