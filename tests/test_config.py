import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from aspect360.config import AspectConfigError, cfg, get_config, reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ASPECT360_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()
    assert config.aspects.pack == "ptolemaic"
    assert config.aspects.default_orb == 8.0
    assert config.ephemeris.mode == "moshier"


def test_override_merges_sections(tmp_path):
    override = tmp_path / "override.yaml"
    override.write_text("ephemeris:\n  mode: swiss\n  path: /data/ephe\n", encoding="utf-8")
    config = get_config(str(override))
    assert config.ephemeris.mode == "swiss"
    assert config.ephemeris.path == "/data/ephe"
    assert config.aspects.pack == "ptolemaic"


def test_env_override_and_cache(tmp_path, monkeypatch):
    override = tmp_path / "override.yaml"
    override.write_text("aspects:\n  pack: extended\n", encoding="utf-8")
    assert cfg().aspects.pack == "ptolemaic"
    monkeypatch.setenv("ASPECT360_CONFIG", str(override))
    assert cfg().aspects.pack == "ptolemaic"
    reset_config()
    assert cfg().aspects.pack == "extended"
    assert cfg() is cfg()


def test_invalid_yaml_raises(tmp_path):
    override = tmp_path / "bad.yaml"
    override.write_text("aspects: [unclosed\n", encoding="utf-8")
    with pytest.raises(AspectConfigError):
        get_config(str(override))


def test_missing_file_raises(tmp_path):
    with pytest.raises(AspectConfigError):
        get_config(str(tmp_path / "missing.yaml"))


def test_top_level_must_be_mapping(tmp_path):
    override = tmp_path / "list.yaml"
    override.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(AspectConfigError):
        get_config(str(override))
