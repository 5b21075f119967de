from __future__ import annotations
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict


class ConfigError(Exception):
    pass


@dataclass
class Config:
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str) -> "Config":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping: {path}")
        return cls(data=data)

    @property
    def rules_file(self) -> str | None:
        return self.data.get("rules_file") or None

    def __getitem__(self, item):
        return self.data[item]

    def get(self, key, default=None):
        return self.data.get(key, default)
