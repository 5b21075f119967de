# tests/test_config.py
import pytest
import yaml

from tldmatch.config import Config, ConfigError


def test_config_load_and_access(tmp_path):
    cfg_dict = {"rules_file": "data/psl.dat", "logging": {"level": "debug"}}
    p = tmp_path / "cfg.yaml"
    p.write_text(yaml.safe_dump(cfg_dict), encoding="utf-8")

    cfg = Config.load(str(p))
    assert cfg["rules_file"] == "data/psl.dat"
    assert cfg.rules_file == "data/psl.dat"
    assert cfg["logging"]["level"] == "debug"
    assert cfg.get("missing", "x") == "x"


def test_config_empty_document(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    cfg = Config.load(str(p))
    assert cfg.data == {}
    assert cfg.rules_file is None


def test_config_rejects_non_mapping(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config.load(str(p))


def test_config_missing_file(tmp_path):
    with pytest.raises(OSError):
        Config.load(str(tmp_path / "nope.yaml"))
