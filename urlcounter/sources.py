from __future__ import annotations
import csv
import logging, requests
from pathlib import Path
from typing import Iterable, List

log = logging.getLogger(__name__)

URL_COLUMNS = ("url", "URL")

def _parse_lines(lines: Iterable[str]) -> List[str]:
    urls = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line)
    return urls

def _parse_csv(path: Path) -> List[str]:
    urls: List[str] = []
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            for key in URL_COLUMNS:
                if row.get(key):
                    urls.append(row[key].strip())
                    break
    return urls

def read_url_list(path: Path) -> List[str]:
    """Read URLs from a .csv file (url/URL column) or a one-per-line text file."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        urls = _parse_csv(path)
    else:
        with open(path, "r", encoding="utf-8-sig") as f:
            urls = _parse_lines(f)
    log.info("Read %d URLs from %s", len(urls), path)
    return urls

def fetch_url_list(url: str, timeout: int = 30) -> List[str]:
    log.info("Fetching URL list: %s timeout=%ss", url, timeout)
    try:
        with requests.get(url, timeout=timeout, headers={
            "User-Agent": "Mozilla/5.0 (compatible; urlcounter/1.0)",
            "Accept": "text/plain, */*; q=0.1",
        }) as resp:
            log.debug("URL list response: status=%s content-type=%s", resp.status_code, resp.headers.get("Content-Type"))
            resp.raise_for_status()
            urls = _parse_lines(resp.text.splitlines())
    except Exception:
        log.exception("Failed to fetch URL list from %s", url)
        raise
    log.info("Fetched %d URLs from %s", len(urls), url)
    return urls

def load_urls(source: str, timeout: int = 30) -> List[str]:
    if source.startswith(("http://", "https://")):
        return fetch_url_list(source, timeout=timeout)
    return read_url_list(Path(source))
