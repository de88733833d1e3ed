"""Report adapters for emitting probe lines.

Implementations:
- Stdout (ping-style terminal lines)
"""
