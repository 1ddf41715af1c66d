"""Base provider — the interface every hosting-service adapter implements."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import httpx

from modelhub.models import Credentials, ModelInfo, ProviderConfig, ProviderSetting
from modelhub.providers.credentials import as_setting, resolve_base_url_and_key

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """One LLM hosting service: a static catalog, optional discovery, and handle creation.

    ``transport`` is handed to every httpx client the provider opens; tests use
    it to stand in for the remote service.
    """

    name: str
    get_api_key_link: str = ""
    config: ProviderConfig
    static_models: tuple[ModelInfo, ...] = ()

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    def list_static_models(self) -> list[ModelInfo]:
        return list(self.static_models)

    @abstractmethod
    async def get_dynamic_models(
        self,
        api_keys: Mapping[str, str] | None = None,
        settings: ProviderSetting | Mapping[str, Any] | None = None,
        server_env: Mapping[str, str] | None = None,
    ) -> list[ModelInfo]:
        """Query the service for models beyond the static catalog."""

    @abstractmethod
    def get_model_instance(
        self,
        model: str,
        server_env: Mapping[str, str] | None = None,
        api_keys: Mapping[str, str] | None = None,
        provider_settings: Mapping[str, ProviderSetting | Mapping[str, Any]] | None = None,
    ) -> Any:
        """Build a callable handle for ``model``."""

    def get_provider_base_url_and_key(
        self,
        api_keys: Mapping[str, str] | None = None,
        provider_settings: ProviderSetting | Mapping[str, Any] | None = None,
        server_env: Mapping[str, str] | None = None,
    ) -> Credentials:
        return resolve_base_url_and_key(
            self.name,
            api_keys=api_keys,
            provider_settings=provider_settings,
            server_env=server_env,
            default_base_url_key=self.config.base_url_key,
            default_api_token_key=self.config.api_token_key,
            default_base_url=self.config.base_url,
        )

    def http_client(self, **kwargs: Any) -> httpx.AsyncClient:
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)


async def get_model_list(
    provider: BaseProvider,
    api_keys: Mapping[str, str] | None = None,
    settings: ProviderSetting | Mapping[str, Any] | None = None,
    server_env: Mapping[str, str] | None = None,
) -> list[ModelInfo]:
    """Static catalog followed by whatever the service reports on top of it.

    Discovery is skipped for providers the user has disabled.
    """
    models = provider.list_static_models()
    setting = as_setting(settings)
    if setting is not None and not setting.enabled:
        logger.info(f"{provider.name} disabled, skipping model discovery")
        return models

    models.extend(await provider.get_dynamic_models(api_keys, setting, server_env))
    return models
