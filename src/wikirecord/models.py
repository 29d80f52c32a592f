"""Core WikiRecord data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Geographic position in signed decimal degrees."""

    longitude: float
    latitude: float


@dataclass(frozen=True, slots=True)
class ExtractedRecord:
    """Structured summary pulled out of one encyclopedia page."""

    title: str
    alias_list: Tuple[str, ...] = ()
    birth_date: Optional[str] = None
    death_date: Optional[str] = None
    coordinate: Optional[Coordinate] = None

    def to_dict(self) -> Dict[str, Any]:
        coordinate = None
        if self.coordinate is not None:
            coordinate = {
                "longitude": self.coordinate.longitude,
                "latitude": self.coordinate.latitude,
            }
        return {
            "title": self.title,
            "alias_list": list(self.alias_list),
            "birth_date": self.birth_date,
            "death_date": self.death_date,
            "coordinate": coordinate,
        }
