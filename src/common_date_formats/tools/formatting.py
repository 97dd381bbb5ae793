"""Formatting tool functions.

Thin wrappers over `common_date_formats.formats` that take and return
the pydantic models in `schemas`.
"""

from __future__ import annotations

import logging

from ..formats import FORMATTERS, ZONED_STYLES, format_date
from ..schemas import (
    FormatAllInput,
    FormatAllOutput,
    FormatDateInput,
    FormatDateOutput,
    StylesOutput,
)

logger = logging.getLogger(__name__)


def format_one(params: FormatDateInput) -> FormatDateOutput:
    """Format a value in one style."""

    result = format_date(
        params.value, params.style, tz=params.timezone, strict=params.strict
    )
    logger.debug("format %s %r -> %r", params.style, params.value, result)
    return FormatDateOutput(value=params.value, style=params.style, result=result)


def format_all(params: FormatAllInput) -> FormatAllOutput:
    """Format a value in every registered style."""

    results = {
        style: format_date(params.value, style, tz=params.timezone, strict=params.strict)
        for style in FORMATTERS
    }
    return FormatAllOutput(value=params.value, results=results)


def list_styles() -> StylesOutput:
    """Names of the registered styles, and which of them use a timezone."""
    return StylesOutput(
        styles=list(FORMATTERS),
        zoned=[s for s in FORMATTERS if s in ZONED_STYLES],
    )
