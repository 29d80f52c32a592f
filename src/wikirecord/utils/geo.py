"""Conversion of coordinate literals to signed decimal degrees."""

from __future__ import annotations

import re

_NUMBER = r"\d+(?:\.\d+)?"

_COORDINATE_RE = re.compile(
    rf"""
    ^(?P<sign>[+-])?
    (?P<degrees>{_NUMBER})\s*[°º]?\s*
    (?:(?P<minutes>{_NUMBER})\s*[′'’]\s*)?
    (?:(?P<seconds>{_NUMBER})\s*[″"”]\s*)?
    (?P<hemisphere>[NSEW])?$
    """,
    re.VERBOSE | re.IGNORECASE,
)

NEGATIVE_HEMISPHERES = frozenset("SW")


def to_decimal(text: str) -> float:
    """Convert ``text`` to decimal degrees.

    Accepts plain decimal values (``"-74.006"``) and degree/minute/second
    literals such as ``"40°42′46″N"`` or ``"74°W"``. Southern and western
    hemispheres yield negative values. Raises ``ValueError`` for anything
    else.
    """
    value = text.replace("\xa0", " ").strip()
    match = _COORDINATE_RE.match(value)
    if match is None:
        raise ValueError(f"Unrecognised coordinate literal: {text!r}")

    degrees = float(match.group("degrees"))
    minutes = float(match.group("minutes") or 0)
    seconds = float(match.group("seconds") or 0)
    if minutes >= 60 or seconds >= 60:
        raise ValueError(f"Minutes and seconds must be below 60: {text!r}")

    result = degrees + minutes / 60 + seconds / 3600
    hemisphere = (match.group("hemisphere") or "").upper()
    if match.group("sign") == "-" or hemisphere in NEGATIVE_HEMISPHERES:
        result = -result
    return result
