"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://en.wikipedia.org/wiki/"
DEFAULT_USER_AGENT = "wikirecord/0.1 (+https://en.wikipedia.org/wiki/Wikipedia:User-Agent_policy)"
REQUEST_TIMEOUT_SECONDS = 20.0


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(slots=True)
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = REQUEST_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    # None keeps every settled lookup for the lifetime of the process.
    cache_max_entries: Optional[int] = None
    import_path: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if self.cache_max_entries is not None and self.cache_max_entries < 1:
            raise ValueError("cache_max_entries must be >= 1")
        if self.import_path is not None:
            self.import_path = Path(self.import_path)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a config from ``WIKIRECORD_*`` environment variables."""
        env = os.environ if environ is None else environ
        import_path = env.get("WIKIRECORD_IMPORT_PATH")
        return cls(
            base_url=env.get("WIKIRECORD_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(env.get("WIKIRECORD_TIMEOUT", REQUEST_TIMEOUT_SECONDS)),
            user_agent=env.get("WIKIRECORD_USER_AGENT", DEFAULT_USER_AGENT),
            cache_max_entries=_optional_int(env.get("WIKIRECORD_CACHE_MAX_ENTRIES")),
            import_path=Path(import_path) if import_path else None,
        )
