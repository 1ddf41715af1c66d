"""Core data structures for provider adapters and model handles."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModelInfo:
    """One model a provider can serve."""

    name: str  # identifier sent to the provider
    label: str  # display label
    provider: str
    max_token_allowed: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "label": self.label,
            "provider": self.provider,
            "max_token_allowed": self.max_token_allowed,
        }


@dataclass(frozen=True)
class ProviderConfig:
    base_url: str
    api_token_key: str
    base_url_key: str = ""  # env var that may override base_url


@dataclass(frozen=True)
class ProviderSetting:
    """Per-provider user settings, usually coming from the UI or a settings file."""

    enabled: bool = True
    base_url: str | None = None
    api_key: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProviderSetting:
        return cls(
            enabled=data.get("enabled", True),
            base_url=data.get("base_url") or data.get("baseUrl"),
            api_key=data.get("api_key") or data.get("apiKey"),
        )


@dataclass(frozen=True)
class Credentials:
    base_url: str
    api_key: str | None = field(default=None, repr=False)

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return f"Credentials(base_url={self.base_url!r}, api_key={masked!r})"


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


@dataclass
class ToolDef:
    """Canonical tool definition. Handles translate this to the wire format."""

    name: str
    description: str
    parameters: dict[str, Any]  # JSON Schema


@dataclass
class ToolCall:
    name: str
    args: dict[str, Any]
    id: str = field(default_factory=lambda: f"tc_{uuid.uuid4().hex[:8]}")


@dataclass
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class ModelResponse:
    text: str | None = None
    tool_calls: list[ToolCall] = field(default_factory=list)
    usage: TokenUsage = field(default_factory=TokenUsage)
    raw: Any = None
