"""Command-line interface for headping."""

from .arguments import build_parser, settings_overrides

__all__ = ["build_parser", "settings_overrides"]
