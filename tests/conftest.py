import time

import pytest

from common_date_formats.config import get_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate each test from DATEFMT_* variables, .env files and cached config."""
    for name in ("DATEFMT_TIMEZONE", "DATEFMT_STRICT", "DATEFMT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def process_tz(monkeypatch):
    """Set the process TZ for tests of the local-time fallback."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
