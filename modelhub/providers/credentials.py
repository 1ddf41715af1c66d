"""Credential resolution — base URL and API key from layered sources."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from modelhub.models import Credentials, ProviderSetting

logger = logging.getLogger(__name__)


def as_setting(settings: ProviderSetting | Mapping[str, Any] | None) -> ProviderSetting | None:
    if settings is None or isinstance(settings, ProviderSetting):
        return settings
    return ProviderSetting.from_dict(dict(settings))


def _first(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value.strip()
    return None


def resolve_base_url_and_key(
    provider_name: str,
    api_keys: Mapping[str, str] | None = None,
    provider_settings: ProviderSetting | Mapping[str, Any] | None = None,
    server_env: Mapping[str, str] | None = None,
    default_base_url_key: str = "",
    default_api_token_key: str = "",
    default_base_url: str = "",
) -> Credentials:
    """Resolve credentials for one provider.

    API key precedence: explicit ``api_keys[provider_name]``, then the
    provider setting, then ``server_env``, then the process environment.
    Base URL precedence: provider setting, then ``server_env`` / process
    environment under ``default_base_url_key``, then ``default_base_url``.
    Blank values count as absent. ``api_key`` is None when nothing resolves.
    """
    api_keys = api_keys or {}
    server_env = server_env or {}
    settings = as_setting(provider_settings)

    base_url = _first(
        settings.base_url if settings else None,
        server_env.get(default_base_url_key) if default_base_url_key else None,
        os.environ.get(default_base_url_key) if default_base_url_key else None,
        default_base_url,
    ) or ""
    base_url = base_url.rstrip("/")

    api_key = _first(
        api_keys.get(provider_name),
        settings.api_key if settings else None,
        server_env.get(default_api_token_key) if default_api_token_key else None,
        os.environ.get(default_api_token_key) if default_api_token_key else None,
    )

    logger.debug(f"Resolved {provider_name} base URL {base_url} (key present: {api_key is not None})")
    return Credentials(base_url=base_url, api_key=api_key)
