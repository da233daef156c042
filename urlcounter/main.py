from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional
from .config import Config
from .logging_setup import setup_logging
from .counter import ON_INVALID_SKIP, count_unique_urls, count_unique_urls_per_top_level_domain
from .normalize import InvalidURL
from .sources import load_urls

log = logging.getLogger(__name__)

EXIT_INVALID_URL = 2
EXIT_BAD_CONFIG = 3

# (function name, input) pairs printed when no --input is given
DEMO_CASES = [
    ("count_unique_urls", ["https://example.com", "https://example.com/"]),
    ("count_unique_urls", ["https://example.com", "http://example.com"]),
    ("count_unique_urls", ["https://example.com?", "https://example.com"]),
    ("count_unique_urls", ["https://example.com?a=1&b=2", "https://example.com?b=2&a=1"]),
    ("count_unique_urls_per_top_level_domain", ["https://example.com"]),
    ("count_unique_urls_per_top_level_domain", ["https://example.com", "https://subdomain.example.com"]),
]

COUNTERS = {
    "count_unique_urls": count_unique_urls,
    "count_unique_urls_per_top_level_domain": count_unique_urls_per_top_level_domain,
}

def run_demo(as_json: bool) -> None:
    for name, urls in DEMO_CASES:
        result = COUNTERS[name](urls)
        if as_json:
            print(json.dumps({"function": name, "input": urls, "output": result}))
        else:
            print(f"{name}({urls}) -> {result}")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="urlcounter", description="Count unique URLs, optionally per top-level domain.")
    ap.add_argument("--config", help="Path to config.yaml")
    ap.add_argument("--input", action="append", default=[], metavar="PATH_OR_URL",
                    help="URL list: text file, CSV with a url column, or http(s) URL (repeatable)")
    ap.add_argument("--by-tld", action="store_true", help="Count URLs per top-level domain")
    ap.add_argument("--skip-invalid", action="store_true", help="Skip URLs without '://' instead of failing")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = Config.load(args.config) if args.config else Config()
    setup_logging(cfg.data)
    log.debug("Starting urlcounter with config: %s", args.config)
    try:
        cfg_policy = cfg.on_invalid
    except ValueError as e:
        log.error("Bad counting.on_invalid in %s: %s", args.config, e)
        return EXIT_BAD_CONFIG

    if not args.input:
        run_demo(args.json)
        return 0

    on_invalid = ON_INVALID_SKIP if args.skip_invalid else cfg_policy
    urls: List[str] = []
    for source in args.input:
        urls.extend(load_urls(source, timeout=cfg.request_timeout))

    try:
        if args.by_tld:
            result = count_unique_urls_per_top_level_domain(urls, on_invalid=on_invalid)
        else:
            result = count_unique_urls(urls, on_invalid=on_invalid)
    except InvalidURL as e:
        log.error("%s (use --skip-invalid to ignore)", e)
        return EXIT_INVALID_URL

    if args.json:
        print(json.dumps({"domains": result} if args.by_tld else {"count": result}, sort_keys=True))
    elif args.by_tld:
        for domain, n in sorted(result.items()):
            print(f"{domain}\t{n}")
    else:
        print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main())
