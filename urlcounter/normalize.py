from __future__ import annotations
from typing import Tuple

SCHEME_SEP = "://"
# Host is cut at each of these, in this order.
HOST_TERMINATORS = ("/", "#", "?")
TLD_SUFFIX = ".com"


class InvalidURL(ValueError):
    """Raised for a URL without a scheme separator."""
    def __init__(self, url: str):
        super().__init__(f"invalid URL (no '{SCHEME_SEP}'): {url!r}")
        self.url = url


def _cut_at(s: str, sep: str) -> str:
    idx = s.find(sep)
    return s if idx < 0 else s[:idx]


def split_scheme_and_host(url: str) -> Tuple[str, str]:
    """Return (scheme, host); path, query and fragment are dropped.

    No case folding, percent-decoding or port handling is done.
    """
    scheme, sep, rest = url.partition(SCHEME_SEP)
    if not sep:
        raise InvalidURL(url)
    host = rest
    for t in HOST_TERMINATORS:
        host = _cut_at(host, t)
    return scheme, host


def normalize_url(url: str) -> str:
    scheme, host = split_scheme_and_host(url)
    return f"{scheme}{SCHEME_SEP}{host}"


def top_level_domain(url: str) -> str:
    """Last label before ".com", plus ".com": sub.example.com -> example.com.

    Hosts are cut at the first ".com" found; there is no public suffix lookup.
    """
    _, host = split_scheme_and_host(url)
    label = _cut_at(host, TLD_SUFFIX).split(".")[-1]
    return label + TLD_SUFFIX
