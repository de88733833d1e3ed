"""headping: ping-style HTTP HEAD probing for a watchlist of domains."""

__version__ = "0.1.0"
