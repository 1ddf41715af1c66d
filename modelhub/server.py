"""FastAPI server — model catalog endpoints for the registered providers."""

from __future__ import annotations

import logging
from typing import Any

import uvicorn
from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel

from modelhub import __version__
from modelhub.config import LOG_FORMAT, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from modelhub.errors import MissingCredential
from modelhub.providers.base import BaseProvider, get_model_list
from modelhub.providers.factory import PROVIDERS, get_provider

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Modelhub", version=__version__, description="LLM provider model catalog")

# Extra constructor kwargs for every provider the server builds (e.g. an httpx transport)
provider_options: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------


class ProviderOut(BaseModel):
    name: str
    get_api_key_link: str
    base_url: str
    api_token_key: str


class ModelOut(BaseModel):
    name: str
    label: str
    provider: str
    max_token_allowed: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/providers")
async def list_providers() -> list[ProviderOut]:
    """Identity data for every registered provider."""
    out = []
    for key in PROVIDERS:
        provider = _get_provider(key)
        out.append(
            ProviderOut(
                name=provider.name,
                get_api_key_link=provider.get_api_key_link,
                base_url=provider.config.base_url,
                api_token_key=provider.config.api_token_key,
            )
        )
    return out


@app.get("/providers/{name}/models")
async def list_models(
    name: str,
    dynamic: bool = False,
    x_provider_api_key: str | None = Header(default=None),
) -> list[ModelOut]:
    """Static catalog, plus discovered models when ``dynamic`` is set."""
    provider = _get_provider(name)
    if not dynamic:
        return [ModelOut(**m.to_dict()) for m in provider.list_static_models()]

    api_keys = {provider.name: x_provider_api_key} if x_provider_api_key else None
    try:
        models = await get_model_list(provider, api_keys=api_keys)
    except MissingCredential as e:
        raise HTTPException(status_code=401, detail=str(e))
    return [ModelOut(**m.to_dict()) for m in models]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_provider(name: str) -> BaseProvider:
    try:
        return get_provider(name, **provider_options)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Provider {name} not found")


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------


def main():
    """Start the Modelhub server."""
    print(f"Starting Modelhub server on {SERVER_HOST}:{SERVER_PORT}")
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
