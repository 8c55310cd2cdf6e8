"""Unit tests for config.py"""

import pytest

from fmconvert.config import load_config


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("STRICT_DATES", "REQUIRE_DATE", "UNKNOWN_KEYS", "LOG_LEVEL"):
        monkeypatch.delenv(f"FMCONVERT_{name}", raising=False)


def test_load_config_defaults():
    """Defaults are lenient dates, optional date, and dropped unknown keys."""
    settings = load_config()
    assert settings.strict_dates is False
    assert settings.require_date is False
    assert settings.unknown_keys == "drop"
    assert settings.log_level == "WARNING"


def test_load_config_reads_yaml(tmp_path):
    """.fmconvert.yaml values are applied."""
    (tmp_path / ".fmconvert.yaml").write_text("unknown_keys: extra\nstrict_dates: true\n")
    settings = load_config()
    assert settings.unknown_keys == "extra"
    assert settings.strict_dates is True


def test_load_config_env_overrides_yaml(tmp_path, monkeypatch):
    """FMCONVERT_UNKNOWN_KEYS takes precedence over .fmconvert.yaml."""
    (tmp_path / ".fmconvert.yaml").write_text("unknown_keys: extra\n")
    monkeypatch.setenv("FMCONVERT_UNKNOWN_KEYS", "error")
    assert load_config().unknown_keys == "error"


def test_load_config_env_bool_coerced(monkeypatch):
    """FMCONVERT_STRICT_DATES is coerced to bool."""
    monkeypatch.setenv("FMCONVERT_STRICT_DATES", "true")
    assert load_config().strict_dates is True


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("FMCONVERT_UNKNOWN_KEYS", "error")
    assert load_config(overrides={"unknown_keys": "drop"}).unknown_keys == "drop"
    assert load_config(overrides={"unknown_keys": None}).unknown_keys == "error"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when .fmconvert.yaml contains invalid YAML."""
    (tmp_path / ".fmconvert.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid .fmconvert.yaml"):
        load_config()


def test_load_config_rejects_bad_policy():
    """unknown_keys outside drop/extra/error fails validation."""
    with pytest.raises(ValueError):
        load_config(overrides={"unknown_keys": "keep"})


def test_load_config_env_log_level_lowercase(monkeypatch):
    """FMCONVERT_LOG_LEVEL is accepted in any case."""
    monkeypatch.setenv("FMCONVERT_LOG_LEVEL", "debug")
    assert load_config().log_level == "DEBUG"


def test_load_config_yaml_log_level_lowercase(tmp_path):
    (tmp_path / ".fmconvert.yaml").write_text("log_level: info\n")
    assert load_config().log_level == "INFO"


def test_load_config_rejects_unknown_file_key(tmp_path):
    """A misspelled key in .fmconvert.yaml fails instead of being ignored."""
    (tmp_path / ".fmconvert.yaml").write_text("strict_date: true\n")
    with pytest.raises(ValueError, match="strict_date"):
        load_config()


def test_load_config_rejects_non_mapping_file(tmp_path):
    (tmp_path / ".fmconvert.yaml").write_text("- strict_dates\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()
