"""Fetch, parse and extract pipeline behind a single-flight cache."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Tuple

from wikirecord.cache import SingleFlightCache
from wikirecord.config import AppConfig
from wikirecord.document import parse_document
from wikirecord.errors import MalformedDocumentError
from wikirecord.extraction.assembler import assemble_record
from wikirecord.fetch import fetch_raw_document
from wikirecord.models import ExtractedRecord

LOGGER = logging.getLogger(__name__)

HTTP_OK = 200

Fetcher = Callable[[str, AppConfig], Tuple[int, str]]


class WikiLoader:
    """Load :class:`ExtractedRecord` objects by article name.

    Concurrent loads of the same name share one fetch, and every settled
    result, ``None`` for missing pages included, is reused afterwards.
    Names are used verbatim as cache keys.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        fetcher: Fetcher = fetch_raw_document,
    ) -> None:
        self.config = config or AppConfig()
        self.fetcher = fetcher
        self.cache: SingleFlightCache[str, Optional[ExtractedRecord]] = SingleFlightCache(
            self._load, max_entries=self.config.cache_max_entries
        )

    async def load(self, name: str) -> Optional[ExtractedRecord]:
        return await self.cache.get(name)

    async def _load(self, name: str) -> Optional[ExtractedRecord]:
        status, markup = await asyncio.to_thread(self.fetcher, name, self.config)
        if status != HTTP_OK:
            LOGGER.info("No article for %r (status %s)", name, status)
            return None

        document = parse_document(markup)
        try:
            record = assemble_record(document)
        except MalformedDocumentError as exc:
            LOGGER.warning("Treating %r as not found: %s", name, exc)
            return None

        LOGGER.info(
            "Extracted %r: aliases=%s born=%s died=%s coordinate=%s",
            record.title,
            len(record.alias_list),
            record.birth_date is not None,
            record.death_date is not None,
            record.coordinate is not None,
        )
        return record


_default_loader: WikiLoader | None = None


def get_default_loader() -> WikiLoader:
    global _default_loader
    if _default_loader is None:
        _default_loader = WikiLoader(AppConfig.from_env())
    return _default_loader


async def load_wikipedia(name: str) -> Optional[ExtractedRecord]:
    """Load ``name`` through the process-wide loader."""
    return await get_default_loader().load(name)
