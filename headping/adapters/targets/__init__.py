"""Target list providers."""

from .builtin import load_default_domains, select_targets

__all__ = ["load_default_domains", "select_targets"]
