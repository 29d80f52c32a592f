"""Compose the field extractors into a single record."""

from __future__ import annotations

from wikirecord.document import DocumentNode
from wikirecord.extraction.extractors import (
    get_alias,
    get_birth_date,
    get_coordinate,
    get_death_date,
    get_title,
)
from wikirecord.models import ExtractedRecord


def assemble_record(document: DocumentNode) -> ExtractedRecord:
    """Run every extractor over ``document``.

    Raises :class:`~wikirecord.errors.MalformedDocumentError` when the page
    heading is missing.
    """
    return ExtractedRecord(
        title=get_title(document),
        alias_list=get_alias(document),
        birth_date=get_birth_date(document),
        death_date=get_death_date(document),
        coordinate=get_coordinate(document),
    )
