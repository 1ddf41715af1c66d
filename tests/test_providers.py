"""Test the Cerebras provider adapter and the provider factory."""

import asyncio
import logging

import httpx
import pytest

from modelhub.errors import MissingCredential
from modelhub.models import ProviderSetting
from modelhub.providers.base import get_model_list
from modelhub.providers.cerebras import CerebrasProvider
from modelhub.providers.factory import create_model, get_provider, parse_model_string
from modelhub.providers.openai_compatible import OpenAICompatibleModel

SERVER_ENV = {"CEREBRAS_API_KEY": "sk-test"}

LISTING = {
    "object": "list",
    "data": [
        {"id": "llama3.1-8b", "object": "model"},
        {"id": "new-model-x", "object": "model"},
        {"id": "not-a-model", "object": "other"},
    ],
}


class CountingTransport(httpx.MockTransport):
    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def _provider(status=200, json=None, content=None):
    transport = CountingTransport(
        lambda request: httpx.Response(status, json=json, content=content)
    )
    return CerebrasProvider(transport=transport), transport


# ---------------------------------------------------------------------------
# Static catalog
# ---------------------------------------------------------------------------


def test_static_models():
    provider = CerebrasProvider()
    models = provider.list_static_models()
    names = [m.name for m in models]
    assert names == [
        "llama-4-scout-17b-16e-instruct",
        "llama3.1-8b",
        "llama-3.3-70b",
        "qwen-3-32b",
        "deepseek-r1-distill-llama-70b",
    ]
    assert len(set(names)) == len(names)
    assert all(m.provider == "Cerebras" and m.max_token_allowed == 32000 for m in models)


def test_static_models_repeatable():
    provider = CerebrasProvider()
    first = provider.list_static_models()
    first.clear()  # callers get their own list
    assert provider.list_static_models() == CerebrasProvider().list_static_models()
    assert len(provider.list_static_models()) == 5


# ---------------------------------------------------------------------------
# Dynamic discovery
# ---------------------------------------------------------------------------


def test_dynamic_models_filters_static_and_non_models():
    provider, transport = _provider(json=LISTING)
    models = asyncio.run(provider.get_dynamic_models(server_env=SERVER_ENV))

    assert len(models) == 1
    assert models[0].name == "new-model-x"
    assert models[0].label == "new-model-x"
    assert models[0].provider == "Cerebras"
    assert models[0].max_token_allowed == 32000
    assert len(transport.requests) == 1


def test_dynamic_models_request_shape():
    provider, transport = _provider(json={"data": []})
    asyncio.run(provider.get_dynamic_models(api_keys={"Cerebras": "sk-explicit"}))

    request = transport.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://api.cerebras.ai/v1/models"
    assert request.headers["Authorization"] == "Bearer sk-explicit"
    assert request.headers["User-Agent"].startswith("modelhub/")


def test_dynamic_models_uses_setting_base_url():
    provider, transport = _provider(json={"data": []})
    settings = ProviderSetting(base_url="https://proxy.example/v1/", api_key="sk-setting")
    asyncio.run(provider.get_dynamic_models(settings=settings))

    assert str(transport.requests[0].url) == "https://proxy.example/v1/models"
    assert transport.requests[0].headers["Authorization"] == "Bearer sk-setting"


def test_dynamic_models_http_error_returns_empty(caplog):
    provider, _ = _provider(status=500, json={"error": "boom"})
    with caplog.at_level(logging.WARNING):
        models = asyncio.run(provider.get_dynamic_models(server_env=SERVER_ENV))

    assert models == []
    assert "Failed to fetch dynamic models for Cerebras" in caplog.text
    assert "HTTP 500" in caplog.text
    assert "sk-test" not in caplog.text


def test_dynamic_models_bad_body_returns_empty():
    provider, _ = _provider(content=b"not json")
    assert asyncio.run(provider.get_dynamic_models(server_env=SERVER_ENV)) == []

    provider, _ = _provider(json={"data": [{"object": "model"}]})
    assert asyncio.run(provider.get_dynamic_models(server_env=SERVER_ENV)) == []


def test_dynamic_models_connection_error_returns_empty():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = CerebrasProvider(transport=httpx.MockTransport(refuse))
    assert asyncio.run(provider.get_dynamic_models(server_env=SERVER_ENV)) == []


def test_dynamic_models_missing_key_raises():
    provider, transport = _provider(json=LISTING)
    with pytest.raises(MissingCredential) as exc:
        asyncio.run(provider.get_dynamic_models(api_keys={}, server_env={}))

    assert exc.value.provider == "Cerebras"
    assert exc.value.token_key == "CEREBRAS_API_KEY"
    assert transport.requests == []


def test_model_list_appends_discovered():
    provider, _ = _provider(json=LISTING)
    models = asyncio.run(get_model_list(provider, server_env=SERVER_ENV))
    assert [m.name for m in models][-1] == "new-model-x"
    assert len(models) == 6


def test_model_list_skips_discovery_when_disabled():
    provider, transport = _provider(json=LISTING)
    models = asyncio.run(get_model_list(provider, settings={"enabled": False}, server_env=SERVER_ENV))
    assert len(models) == 5
    assert transport.requests == []


# ---------------------------------------------------------------------------
# Model handles
# ---------------------------------------------------------------------------


def test_model_instance_bound_without_network():
    provider, transport = _provider(json=LISTING)
    handle = provider.get_model_instance(model="llama-3.3-70b", server_env=SERVER_ENV)

    assert isinstance(handle, OpenAICompatibleModel)
    assert handle.model == "llama-3.3-70b"
    assert handle.base_url == "https://api.cerebras.ai/v1"
    assert handle.api_key == "sk-test"
    assert transport.requests == []


def test_model_instance_reads_settings_by_provider_name():
    provider = CerebrasProvider()
    handle = provider.get_model_instance(
        model="unknown-model",
        server_env={},
        provider_settings={
            "Cerebras": {"baseUrl": "https://proxy.example/v1", "apiKey": "sk-setting"},
            "Other": {"apiKey": "sk-other"},
        },
    )
    assert handle.model == "unknown-model"
    assert handle.base_url == "https://proxy.example/v1"
    assert handle.api_key == "sk-setting"


def test_model_instance_missing_key_raises():
    provider = CerebrasProvider()
    with pytest.raises(MissingCredential):
        provider.get_model_instance(model="llama-3.3-70b", server_env={})

    with pytest.raises(MissingCredential):
        provider.get_model_instance(
            model="llama-3.3-70b",
            server_env={},
            provider_settings={"Other": {"apiKey": "sk-other"}},
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def test_parse_model_string():
    assert parse_model_string("cerebras/llama-3.3-70b") == ("cerebras", "llama-3.3-70b")
    assert parse_model_string("Cerebras/qwen-3-32b") == ("cerebras", "qwen-3-32b")
    assert parse_model_string("llama3.1-8b") == ("cerebras", "llama3.1-8b")


def test_get_provider():
    assert isinstance(get_provider("cerebras"), CerebrasProvider)
    assert isinstance(get_provider("Cerebras"), CerebrasProvider)
    with pytest.raises(ValueError):
        get_provider("nope")


def test_create_model():
    handle = create_model("cerebras/qwen-3-32b", server_env=SERVER_ENV)
    assert handle.model == "qwen-3-32b"
    assert handle.api_key == "sk-test"
