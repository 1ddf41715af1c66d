"""Provider error taxonomy."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for errors raised by provider adapters."""


class MissingCredential(ProviderError):
    """No API key could be resolved for a provider. Configuration error, not retried."""

    def __init__(self, provider: str, token_key: str = ""):
        self.provider = provider
        self.token_key = token_key
        hint = f" (set {token_key})" if token_key else ""
        super().__init__(f"Missing API key for {provider} provider{hint}")


class UpstreamHttpError(ProviderError):
    """The hosting service answered with a non-success status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code}: {reason}")
