from .normalize import InvalidURL, normalize_url, split_scheme_and_host, top_level_domain
from .counter import count_unique_urls, count_unique_urls_per_top_level_domain

__all__ = [
    "InvalidURL",
    "normalize_url",
    "split_scheme_and_host",
    "top_level_domain",
    "count_unique_urls",
    "count_unique_urls_per_top_level_domain",
]
