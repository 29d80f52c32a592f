"""Hand-off of finished records to the import sink."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from wikirecord.errors import InvalidRecordTypeError
from wikirecord.models import ExtractedRecord

LOGGER = logging.getLogger(__name__)

RECORD_TYPE_NAMES: Mapping[str, Tuple[str, ...]] = {
    "thing": ("person", "place", "artefact"),
    "event": ("event", "birth", "death", "start", "end", "reign", "fl"),
    "medium": ("article", "audio", "map", "picture", "subsection", "video"),
}


@dataclass(slots=True)
class ImportRequest:
    title: str
    record_type: str
    record_subtype: str
    birth_date: str = ""
    death_date: str = ""
    longitude: Optional[float] = None
    latitude: Optional[float] = None


def default_subtype(record_type: str) -> str:
    try:
        return RECORD_TYPE_NAMES[record_type][0]
    except KeyError:
        raise InvalidRecordTypeError(f"Unknown record type: {record_type!r}") from None


def validate_request(request: ImportRequest) -> None:
    if not request.title.strip():
        raise InvalidRecordTypeError("A record needs a title")
    subtypes = RECORD_TYPE_NAMES.get(request.record_type)
    if subtypes is None:
        raise InvalidRecordTypeError(f"Unknown record type: {request.record_type!r}")
    if request.record_subtype not in subtypes:
        raise InvalidRecordTypeError(
            f"Unknown subtype {request.record_subtype!r} for {request.record_type!r}; "
            f"expected one of {', '.join(subtypes)}"
        )


def request_from_record(
    record: ExtractedRecord,
    record_type: str,
    record_subtype: str | None = None,
) -> ImportRequest:
    """Prefill an import request from an extracted record."""
    coordinate = record.coordinate
    return ImportRequest(
        title=record.title,
        record_type=record_type,
        record_subtype=record_subtype or default_subtype(record_type),
        birth_date=record.birth_date or "",
        death_date=record.death_date or "",
        longitude=coordinate.longitude if coordinate else None,
        latitude=coordinate.latitude if coordinate else None,
    )


def import_record(request: ImportRequest, output: Path | None = None) -> Dict[str, Any]:
    """Validate and emit ``request``; append it as a JSON line to ``output`` if given."""
    validate_request(request)
    payload = asdict(request)
    LOGGER.info("Importing record: %s", payload)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload, ensure_ascii=False) + "\n")
    return payload
