"""Target list provider.

Supplies the ordered domains to probe: the ones given on the command
line, or the packaged list of popular domains when none are given.
"""

from collections.abc import Sequence
from importlib import resources

DEFAULT_DOMAINS_RESOURCE = "domains.txt"


def load_default_domains() -> tuple[str, ...]:
    """Read the packaged domain list, one domain per line, in file order."""
    raw = (
        resources.files(__package__)
        .joinpath(DEFAULT_DOMAINS_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return tuple(raw.splitlines())


def select_targets(domains: Sequence[str] | None = None) -> tuple[str, ...]:
    """Return the domains to probe.

    Explicit domains are used verbatim (no dedup, no validation). An
    absent or empty sequence falls back to the packaged defaults.
    """
    if domains:
        return tuple(domains)
    return load_default_domains()
