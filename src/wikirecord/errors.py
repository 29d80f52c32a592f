"""Exceptions raised by WikiRecord."""

from __future__ import annotations


class WikiRecordError(Exception):
    """Base class for WikiRecord errors."""


class MalformedDocumentError(WikiRecordError):
    """A fetched page lacks the structure needed to identify its subject."""


class InvalidRecordTypeError(WikiRecordError, ValueError):
    """Unknown record type or subtype passed to the import sink."""
