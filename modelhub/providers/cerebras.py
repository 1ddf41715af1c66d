"""Cerebras provider adapter (OpenAI-compatible API)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from modelhub.config import USER_AGENT
from modelhub.errors import MissingCredential, UpstreamHttpError
from modelhub.models import ModelInfo, ProviderConfig, ProviderSetting
from modelhub.providers.base import BaseProvider
from modelhub.providers.openai_compatible import OpenAICompatibleModel, create_openai

logger = logging.getLogger(__name__)

# Cerebras' listing endpoint does not report context length
DEFAULT_MAX_TOKENS = 32000


class CerebrasProvider(BaseProvider):
    name = "Cerebras"
    get_api_key_link = "https://cloud.cerebras.ai/"

    config = ProviderConfig(
        base_url="https://api.cerebras.ai/v1",
        api_token_key="CEREBRAS_API_KEY",
        base_url_key="CEREBRAS_API_BASE_URL",
    )

    static_models = (
        ModelInfo("llama-4-scout-17b-16e-instruct", "Llama 4 Scout (17B)", "Cerebras", DEFAULT_MAX_TOKENS),
        ModelInfo("llama3.1-8b", "Llama 3.1 8B", "Cerebras", DEFAULT_MAX_TOKENS),
        ModelInfo("llama-3.3-70b", "Llama 3.3 70B", "Cerebras", DEFAULT_MAX_TOKENS),
        ModelInfo("qwen-3-32b", "Qwen 3 32B", "Cerebras", DEFAULT_MAX_TOKENS),
        ModelInfo("deepseek-r1-distill-llama-70b", "DeepSeek R1 Distill Llama 70B", "Cerebras", DEFAULT_MAX_TOKENS),
    )

    async def get_dynamic_models(
        self,
        api_keys: Mapping[str, str] | None = None,
        settings: ProviderSetting | Mapping[str, Any] | None = None,
        server_env: Mapping[str, str] | None = None,
    ) -> list[ModelInfo]:
        creds = self.get_provider_base_url_and_key(api_keys, settings, server_env)
        if not creds.api_key:
            raise MissingCredential(self.name, self.config.api_token_key)

        try:
            async with self.http_client() as client:
                resp = await client.get(
                    f"{creds.base_url}/models",
                    headers={
                        "Authorization": f"Bearer {creds.api_key}",
                        "User-Agent": USER_AGENT,
                    },
                )
                if not resp.is_success:
                    raise UpstreamHttpError(resp.status_code, resp.reason_phrase)
                data = resp.json()

            static_ids = {m.name for m in self.static_models}
            return [
                ModelInfo(
                    name=m["id"],
                    label=str(m["id"]),
                    provider=self.name,
                    max_token_allowed=DEFAULT_MAX_TOKENS,
                )
                for m in data.get("data") or []
                if m.get("object") == "model" and m.get("id") not in static_ids
            ]
        except Exception as e:
            logger.warning(f"Failed to fetch dynamic models for {self.name}: {e}")
            return []

    def get_model_instance(
        self,
        model: str,
        server_env: Mapping[str, str] | None = None,
        api_keys: Mapping[str, str] | None = None,
        provider_settings: Mapping[str, ProviderSetting | Mapping[str, Any]] | None = None,
    ) -> OpenAICompatibleModel:
        creds = self.get_provider_base_url_and_key(
            api_keys,
            (provider_settings or {}).get(self.name),
            server_env,
        )
        if not creds.api_key:
            raise MissingCredential(self.name, self.config.api_token_key)

        http_client = self.http_client() if self._transport is not None else None
        openai = create_openai(creds.base_url, creds.api_key, http_client=http_client)
        return openai(model)
