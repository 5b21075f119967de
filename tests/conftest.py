# tests/conftest.py
from __future__ import annotations
import logging
from pathlib import Path
import pytest
import yaml

from tldmatch.config import Config
from tldmatch.resolver import Resolver
from tldmatch.rules import RuleTree, parse

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def rules_path() -> Path:
    return DATA_DIR / "public_suffix_list.dat"


@pytest.fixture(scope="session")
def rules_text(rules_path) -> str:
    return rules_path.read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def tree(rules_text) -> RuleTree:
    return parse(rules_text)


@pytest.fixture(scope="session")
def resolver(tree) -> Resolver:
    return Resolver(tree)


@pytest.fixture
def tmp_config(tmp_path, rules_path) -> Path:
    cfg = {
        "rules_file": str(rules_path),
        "logging": {
            "level": "DEBUG",
            "console": True,
            "file": str(tmp_path / "logs" / "tldmatch.log"),
            "rotate": {"when": "midnight", "backupCount": 2},
        },
    }
    p = tmp_path / "config.yaml"
    p.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return p


@pytest.fixture
def config(tmp_config) -> Config:
    return Config.load(str(tmp_config))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
