# tests/conftest.py
from __future__ import annotations
from pathlib import Path
import types
import pytest
import yaml

from urlcounter.config import Config


@pytest.fixture
def tmp_config(tmp_path) -> Config:
    cfg = {
        "counting": {"on_invalid": "raise"},
        "sources": {"request_timeout_seconds": 5},
        "logging": {"level": "DEBUG", "console": True, "json": False},
        "web": {
            "host": "127.0.0.1",
            "port": 8090,
            "basic_auth": {"enabled": False},
        },
    }
    return Config(cfg)


@pytest.fixture
def config_file(tmp_path, tmp_config) -> Path:
    p = tmp_path / "config.yaml"
    p.write_text(yaml.safe_dump(tmp_config.data), encoding="utf-8")
    return p


# --- Simple fake response object for requests.get ---
class FakeResp:
    def __init__(self, status=200, text="", headers=None):
        self.status_code = status
        self.text = text
        self.headers = headers or {}

    def raise_for_status(self):
        if not (200 <= self.status_code < 300):
            import requests
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def __enter__(self): return self
    def __exit__(self, *exc): return False


@pytest.fixture
def fake_requests(monkeypatch):
    """
    Registry-based stub for requests.get, keyed by URL.
    """
    registry_get = {}
    calls = []

    def _get(url, *args, **kwargs):
        calls.append((url, kwargs))
        return registry_get.get(url, FakeResp(404, "not found"))

    def register_get(url, resp: FakeResp):
        registry_get[url] = resp

    monkeypatch.setattr("requests.get", _get)
    ns = types.SimpleNamespace(register_get=register_get, calls=calls, FakeResp=FakeResp)
    return ns


@pytest.fixture
def url_list_txt(tmp_path) -> Path:
    p = tmp_path / "urls.txt"
    p.write_text(
        "# seeds\n"
        "https://example.com/start\n"
        "\n"
        "https://example.com/?b=2&a=1\n"
        "http://shop.example.com/cart#top\n",
        encoding="utf-8",
    )
    return p


@pytest.fixture
def url_list_csv(tmp_path) -> Path:
    p = tmp_path / "urls.csv"
    p.write_text(
        "URL,note\n"
        "https://a.example.com/start,first\n"
        "https://b.other.com/page?x=1,second\n"
        ",empty\n",
        encoding="utf-8",
    )
    return p
