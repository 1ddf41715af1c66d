"""Provider adapter layer — one adapter per LLM hosting service."""

from modelhub.providers.base import BaseProvider, get_model_list
from modelhub.providers.cerebras import CerebrasProvider
from modelhub.providers.factory import create_model, get_provider

__all__ = ["BaseProvider", "CerebrasProvider", "create_model", "get_model_list", "get_provider"]
