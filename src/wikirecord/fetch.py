"""Raw page retrieval from Wikipedia."""

from __future__ import annotations

import logging
from typing import Tuple
from urllib.parse import quote

import requests

from wikirecord.config import AppConfig

LOGGER = logging.getLogger(__name__)

# Characters left untouched by JavaScript's encodeURI.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def build_page_url(name: str, config: AppConfig) -> str:
    return f"{config.base_url}{quote(name, safe=_URI_SAFE)}"


def fetch_raw_document(name: str, config: AppConfig) -> Tuple[int, str]:
    """Fetch the article for ``name`` and return ``(status_code, markup)``.

    Non-success statuses are returned as-is so the caller can treat them as
    "not found". Network failures raise ``requests.RequestException``.
    """
    url = build_page_url(name, config)
    response = requests.get(
        url,
        timeout=config.timeout,
        headers={"User-Agent": config.user_agent},
    )
    LOGGER.info("Wikipedia fetch: name=%r status=%s", name, response.status_code)
    return response.status_code, response.text
