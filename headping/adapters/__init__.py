"""External adapters for headping.

This package contains all external dependencies (httpx, argparse,
packaged data) and provides implementations of the core port interfaces.

Adapter Organization:

- requester/: Adapters that issue HEAD probes (httpx)
- report/: Adapters that emit report lines (stdout)
- targets/: The target list provider and packaged default domains
- cli/: Command-line argument parsing
"""
