import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real keys from the shell or a .env file out of the tests."""
    monkeypatch.delenv("CEREBRAS_API_KEY", raising=False)
    monkeypatch.delenv("CEREBRAS_API_BASE_URL", raising=False)
