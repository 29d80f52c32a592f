"""Small text helpers shared by the extractors."""

from __future__ import annotations


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return " ".join(text.split())


def strip_wrapping_parens(text: str) -> str:
    """Trim ``text`` and drop one leading ``(`` and one trailing ``)``.

    The two sides are handled independently, so ``"(age 54"`` becomes
    ``"age 54"`` as well.
    """
    value = text.strip()
    if value.startswith("("):
        value = value[1:]
    if value.endswith(")"):
        value = value[:-1]
    return value
