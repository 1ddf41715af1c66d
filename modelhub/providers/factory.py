"""Provider factory — look up adapters by name and build model handles from model strings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from modelhub.models import ProviderSetting
from modelhub.providers.base import BaseProvider
from modelhub.providers.cerebras import CerebrasProvider

PROVIDERS: dict[str, type[BaseProvider]] = {
    "cerebras": CerebrasProvider,
}

DEFAULT_PROVIDER = "cerebras"


def parse_model_string(model: str) -> tuple[str, str]:
    """Parse 'provider/model-name' into (provider, model)."""
    if "/" in model:
        provider, model_name = model.split("/", 1)
        if provider.lower() in PROVIDERS:
            return provider.lower(), model_name
    return DEFAULT_PROVIDER, model


def get_provider(name: str, **kwargs: Any) -> BaseProvider:
    """Instantiate the adapter registered under ``name`` (case-insensitive)."""
    cls = PROVIDERS.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown provider: {name}. Available: {', '.join(sorted(PROVIDERS))}")
    return cls(**kwargs)


def create_model(
    model: str,
    server_env: Mapping[str, str] | None = None,
    api_keys: Mapping[str, str] | None = None,
    provider_settings: Mapping[str, ProviderSetting | Mapping[str, Any]] | None = None,
) -> Any:
    """Build a model handle for a 'provider/model-name' string."""
    provider_name, model_name = parse_model_string(model)
    provider = get_provider(provider_name)
    return provider.get_model_instance(
        model_name,
        server_env=server_env,
        api_keys=api_keys,
        provider_settings=provider_settings,
    )
