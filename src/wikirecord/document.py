"""Read-only document tree used by the extractors.

The extractors only ever talk to :class:`DocumentNode`. :func:`parse_document`
provides the BeautifulSoup-backed implementation used in production.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, PageElement, Tag

HTML_PARSER = "html.parser"


class DocumentNode(Protocol):
    """Minimal query interface over a parsed page."""

    def select_one(self, selector: str) -> Optional["DocumentNode"]:
        ...

    def select(self, selector: str) -> List["DocumentNode"]:
        ...

    @property
    def text(self) -> str:
        ...

    @property
    def inner_html(self) -> str:
        ...

    @property
    def children(self) -> List["DocumentNode"]:
        ...

    @property
    def class_names(self) -> List[str]:
        ...


class SoupNode:
    """:class:`DocumentNode` over a BeautifulSoup element or text node."""

    __slots__ = ("_element",)

    def __init__(self, element: PageElement) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"SoupNode({self._element!r})"

    @property
    def is_text(self) -> bool:
        return isinstance(self._element, NavigableString)

    def select_one(self, selector: str) -> Optional["SoupNode"]:
        if not isinstance(self._element, Tag):
            return None
        found = self._element.select_one(selector)
        return SoupNode(found) if found is not None else None

    def select(self, selector: str) -> List["SoupNode"]:
        if not isinstance(self._element, Tag):
            return []
        return [SoupNode(found) for found in self._element.select(selector)]

    @property
    def text(self) -> str:
        if isinstance(self._element, NavigableString):
            return str(self._element)
        return self._element.get_text()

    @property
    def inner_html(self) -> str:
        if isinstance(self._element, NavigableString):
            return str(self._element)
        return self._element.decode_contents()

    @property
    def children(self) -> List["SoupNode"]:
        if not isinstance(self._element, Tag):
            return []
        return [
            SoupNode(child)
            for child in self._element.children
            if not isinstance(child, Comment)
        ]

    @property
    def class_names(self) -> List[str]:
        if not isinstance(self._element, Tag):
            return []
        classes = self._element.get("class") or []
        if isinstance(classes, str):
            return classes.split()
        return list(classes)


def parse_document(raw_markup: str) -> SoupNode:
    """Parse raw HTML into a queryable :class:`SoupNode` tree."""
    return SoupNode(BeautifulSoup(raw_markup, HTML_PARSER))
