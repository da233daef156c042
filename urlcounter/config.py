from __future__ import annotations
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict
from .counter import check_policy

@dataclass
class Config:
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str) -> "Config":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(data=data or {})

    def __getitem__(self, item):
        return self.data[item]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def section(self, key) -> Dict[str, Any]:
        """Nested mapping for key, or {} when absent or null."""
        return self.data.get(key) or {}

    @property
    def on_invalid(self) -> str:
        """Batch policy for invalid URLs; ValueError for an unknown value."""
        return check_policy(self.section("counting").get("on_invalid", "raise"))

    @property
    def request_timeout(self) -> int:
        return int(self.section("sources").get("request_timeout_seconds", 30))
