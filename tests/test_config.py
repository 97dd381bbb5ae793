from pathlib import Path

import pytest
from pydantic import ValidationError

from common_date_formats.config import get_config, load_config
from common_date_formats.errors import ConfigError


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.timezone is None
    assert cfg.strict is False
    assert cfg.log_level == "WARNING"


def test_env(monkeypatch) -> None:
    monkeypatch.setenv("DATEFMT_TIMEZONE", "Europe/London")
    monkeypatch.setenv("DATEFMT_STRICT", "1")
    monkeypatch.setenv("DATEFMT_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.timezone == "Europe/London"
    assert cfg.strict is True
    assert cfg.log_level == "DEBUG"


def test_blank_timezone_means_local(monkeypatch) -> None:
    monkeypatch.setenv("DATEFMT_TIMEZONE", "  ")
    assert load_config().timezone is None


def test_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("DATEFMT_TIMEZONE=Asia/Tokyo\n")
    assert load_config().timezone == "Asia/Tokyo"


def test_unknown_timezone_is_kept_for_later(monkeypatch) -> None:
    monkeypatch.setenv("DATEFMT_TIMEZONE", "Nowhere/Special")
    assert load_config().timezone == "Nowhere/Special"


def test_log_level_is_normalized_not_checked(monkeypatch) -> None:
    monkeypatch.setenv("DATEFMT_LOG_LEVEL", " chatty ")
    assert load_config().log_level == "CHATTY"


def test_foreign_dotenv_keys_are_ignored(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "DATABASE_URL=postgres://x\nSECRET_KEY=abc\nDATEFMT_STRICT=true\n"
    )
    cfg = load_config()
    assert cfg.strict is True
    assert not hasattr(cfg, "database_url")


def test_invalid_strict_value(monkeypatch) -> None:
    monkeypatch.setenv("DATEFMT_STRICT", "sometimes")
    with pytest.raises(ValidationError):
        load_config()
    with pytest.raises(ConfigError) as exc_info:
        get_config()
    assert exc_info.value.code == "CONFIG_ERROR"


def test_config_is_frozen() -> None:
    cfg = load_config()
    with pytest.raises(ValidationError):
        cfg.strict = True


def test_get_config_is_memoized(monkeypatch) -> None:
    first = get_config()
    monkeypatch.setenv("DATEFMT_TIMEZONE", "Europe/London")
    assert get_config() is first
    get_config.cache_clear()
    assert get_config().timezone == "Europe/London"
