"""Smoke tests for package import, version and export surface."""

import logging

import pytest

import common_date_formats
from common_date_formats import formats
from common_date_formats.log import PACKAGE_LOGGER, configure_logging


def test_version() -> None:
    assert common_date_formats.__version__ == "0.2.0"


def test_nothing_exported_by_default() -> None:
    assert common_date_formats.__all__ == ["__version__"]
    assert not hasattr(common_date_formats, "format_date_rss")


def test_formats_export_group() -> None:
    assert sorted(formats.__all__) == [
        "format_date_cms_publishdate",
        "format_date_integer",
        "format_date_rss",
        "format_date_usenglish",
        "format_date_usenglish_long_ampm",
        "format_date_w3c",
    ]


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("debug")
    configure_logging("INFO")
    ours = [h for h in logger.handlers if getattr(h, "_cdf_handler", False)]
    assert len(ours) == 1
    assert logger.level == logging.INFO
    assert logger is logging.getLogger(PACKAGE_LOGGER)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("chatty")
