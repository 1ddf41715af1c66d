"""Modelhub — uniform provider adapters for remote LLM hosting services."""

__version__ = "0.1.0"
