"""Text helpers for front-matter values."""

from __future__ import annotations


def strip_wrapping_quotes(value: str) -> str:
    """Remove the first and last character when both are double quotes.

    No other unescaping is performed.
    """
    if value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value
