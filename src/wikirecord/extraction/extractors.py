"""Field extractors for Wikipedia article markup.

Every extractor takes a parsed :class:`~wikirecord.document.DocumentNode` and
returns one field of :class:`~wikirecord.models.ExtractedRecord`. A heuristic
that does not match yields ``None`` (or an empty list for aliases). Only a
missing page heading is treated as an error.

The string checks below are deliberately loose pattern matches against the
current Wikipedia layout; each one lives in its own predicate so markup drift
shows up in a focused test.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Tuple

from wikirecord.document import DocumentNode
from wikirecord.errors import MalformedDocumentError
from wikirecord.models import Coordinate
from wikirecord.utils.geo import to_decimal
from wikirecord.utils.text import collapse_whitespace, strip_wrapping_parens

LOGGER = logging.getLogger(__name__)

TITLE_SELECTOR = "#firstHeading"
CARD_ROW_SELECTOR = "table.infobox.vcard tr"
CONTENT_PARAGRAPH_SELECTOR = "#mw-content-text p"
CONTENT_LIST_ITEM_SELECTOR = "#mw-content-text ul li"

COORDINATES_MARKER = "coordinates"
DISAMBIGUATION_MARKER = "most commonly refers to"
TOC_CLASS_PREFIX = "toclevel"

_DIGIT_RE = re.compile(r"\d")


def is_coordinate_row(row: DocumentNode) -> bool:
    return COORDINATES_MARKER in row.text.strip().lower()


def is_disambiguation_paragraph(paragraph: DocumentNode) -> bool:
    return DISAMBIGUATION_MARKER in paragraph.text.strip().lower()


def is_alias_candidate(item: DocumentNode) -> bool:
    """A list item that opens with a link and is not a table-of-contents entry."""
    if not item.inner_html.strip().startswith("<a"):
        return False
    return not any(name.startswith(TOC_CLASS_PREFIX) for name in item.class_names)


def has_digit(text: str) -> bool:
    return _DIGIT_RE.search(text) is not None


def get_title(document: DocumentNode) -> str:
    heading = document.select_one(TITLE_SELECTOR)
    if heading is None:
        raise MalformedDocumentError(f"Page has no {TITLE_SELECTOR} heading")
    return collapse_whitespace(heading.text)


def get_coordinate(
    document: DocumentNode, parse: Callable[[str], float] = to_decimal
) -> Optional[Coordinate]:
    """Read the coordinate row of the summary card, if there is one.

    Only the first row mentioning coordinates is considered. A row that lacks
    either axis, or whose literals cannot be parsed, gives ``None``.
    """
    for row in document.select(CARD_ROW_SELECTOR):
        if not is_coordinate_row(row):
            continue

        longitude = row.select_one(".longitude")
        latitude = row.select_one(".latitude")
        if longitude is None or latitude is None:
            LOGGER.debug("Coordinate row found without both axes")
            return None
        try:
            return Coordinate(
                longitude=parse(longitude.text.strip()),
                latitude=parse(latitude.text.strip()),
            )
        except ValueError as exc:
            LOGGER.debug("Skipping unparseable coordinate: %s", exc)
            return None
    return None


def get_alias(document: DocumentNode) -> Tuple[str, ...]:
    """Collect the entries of a disambiguation page in document order."""
    paragraphs = document.select(CONTENT_PARAGRAPH_SELECTOR)
    if not any(is_disambiguation_paragraph(p) for p in paragraphs):
        return ()

    alias_list: List[str] = []
    for item in document.select(CONTENT_LIST_ITEM_SELECTOR):
        if not is_alias_candidate(item):
            continue
        link = item.select_one("a")
        if link is not None:
            alias_list.append(collapse_whitespace(link.text))
    return tuple(alias_list)


def get_from_card(document: DocumentNode, name: str) -> Optional[str]:
    """Return the first numeric fragment of the card row labelled ``name``.

    Rows match when their header cell text, lower-cased and trimmed, equals
    ``name`` exactly. The value is taken from the first direct child of the
    data cell whose text contains a digit.
    """
    for row in document.select(CARD_ROW_SELECTOR):
        header = row.select_one("th")
        if header is None or header.text.lower().strip() != name:
            continue

        cell = row.select_one("td")
        if cell is None:
            continue
        for child in cell.children:
            text = child.text
            if text and has_digit(text):
                return strip_wrapping_parens(text)
    return None


def get_birth_date(document: DocumentNode) -> Optional[str]:
    return get_from_card(document, "born")


def get_death_date(document: DocumentNode) -> Optional[str]:
    return get_from_card(document, "died")
