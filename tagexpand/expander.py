"""Expanding abbreviations into markup."""

from __future__ import annotations

from .statement import Statement


def expand(text: str) -> str:
    """Expand an abbreviation into indented markup.

    Raises ValueError when the abbreviation is malformed.
    """
    return Statement(text).render()