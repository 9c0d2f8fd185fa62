"""CLI package for the training adapter."""

import typer

app = typer.Typer(
    name="unitrain",
    help="Uniform training adapter for six classification backends",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

# Register commands at import time so the app can be used programmatically
# (e.g., in tests) without invoking the full CLI entrypoint.
from unitrain.cli import train  # noqa: E402,F401

__all__ = ["app"]
