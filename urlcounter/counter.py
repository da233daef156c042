from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, Iterator

from .normalize import InvalidURL, normalize_url, top_level_domain

log = logging.getLogger(__name__)

ON_INVALID_RAISE = "raise"
ON_INVALID_SKIP = "skip"
ON_INVALID_POLICIES = (ON_INVALID_RAISE, ON_INVALID_SKIP)


def check_policy(on_invalid: str) -> str:
    if on_invalid not in ON_INVALID_POLICIES:
        raise ValueError(f"unknown on_invalid policy: {on_invalid!r} (expected one of {ON_INVALID_POLICIES})")
    return on_invalid


def _keyed(urls: Iterable[str], key: Callable[[str], str], on_invalid: str) -> Iterator[str]:
    """Yield key(url) for every URL, applying the invalid-URL policy."""
    for url in urls:
        try:
            yield key(url)
        except InvalidURL as e:
            if on_invalid == ON_INVALID_RAISE:
                raise
            log.warning("Skipping %s", e)


def count_unique_urls(urls: Iterable[str], on_invalid: str = ON_INVALID_RAISE) -> int:
    """Count distinct scheme://host keys among urls.

    on_invalid="raise" aborts on the first URL without "://",
    on_invalid="skip" logs and ignores it.
    """
    check_policy(on_invalid)
    seen = set(_keyed(urls, normalize_url, on_invalid))
    log.debug("Unique URLs: %d", len(seen))
    return len(seen)


def count_unique_urls_per_top_level_domain(urls: Iterable[str], on_invalid: str = ON_INVALID_RAISE) -> Dict[str, int]:
    """Count URLs per top-level domain key; every occurrence counts."""
    check_policy(on_invalid)
    counts: Dict[str, int] = {}
    for tld in _keyed(urls, top_level_domain, on_invalid):
        counts[tld] = counts.get(tld, 0) + 1
    log.debug("Top-level domains: %d", len(counts))
    return counts
