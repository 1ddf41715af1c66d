"""Command-line interface — inspect provider model catalogs."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.table import Table

from modelhub.config import LOG_FORMAT, LOG_LEVEL
from modelhub.errors import MissingCredential
from modelhub.models import ModelInfo
from modelhub.providers.base import get_model_list
from modelhub.providers.factory import DEFAULT_PROVIDER, PROVIDERS, get_provider

console = Console()


def print_models(provider_name: str, models: list[ModelInfo]):
    """Print a model catalog as a table."""
    table = Table(title=f"{provider_name} models", show_header=True, header_style="bold magenta")
    table.add_column("Model", style="cyan")
    table.add_column("Label", style="green")
    table.add_column("Max tokens", style="yellow", justify="right")

    for m in models:
        table.add_row(m.name, m.label, str(m.max_token_allowed))

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modelhub", description="LLM provider model catalogs")
    sub = parser.add_subparsers(dest="command", required=True)

    models = sub.add_parser("models", help="List models for a provider")
    models.add_argument("--provider", default=DEFAULT_PROVIDER, choices=sorted(PROVIDERS))
    models.add_argument("--dynamic", action="store_true", help="Also query the provider for extra models")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    provider = get_provider(args.provider)
    if not args.dynamic:
        print_models(provider.name, provider.list_static_models())
        return 0

    try:
        models = asyncio.run(get_model_list(provider))
    except MissingCredential as e:
        console.print(f"[red]{e}[/red]")
        if provider.get_api_key_link:
            console.print(f"[dim]Get a key at {provider.get_api_key_link}[/dim]")
        return 1

    print_models(provider.name, models)
    return 0


if __name__ == "__main__":
    sys.exit(main())
