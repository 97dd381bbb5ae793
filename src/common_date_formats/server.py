"""FastMCP server entrypoint.

Registers the date formatting tools. The tool implementations live in
`tools` so they can be unit-tested without the runtime.

Note: FastMCP is imported lazily; the formatters themselves do not
need it.
"""

from __future__ import annotations

import logging

from .config import get_config
from .log import configure_logging
from .schemas import (
    FormatAllInput,
    FormatAllOutput,
    FormatDateInput,
    FormatDateOutput,
    StylesOutput,
)
from .tools import format_all, format_one, list_styles
from .utils import resolve_timezone

logger = logging.getLogger(__name__)


def _register_fastmcp_tools(app):
    # Namespace: dates.*

    @app.tool("dates.format")
    def dates_format(params: FormatDateInput) -> FormatDateOutput:
        return format_one(params)

    @app.tool("dates.format_all")
    def dates_format_all(params: FormatAllInput) -> FormatAllOutput:
        return format_all(params)

    @app.tool("dates.styles")
    def dates_styles() -> StylesOutput:
        return list_styles()


def main() -> None:
    """Run the FastMCP application.

    Loads configuration, sets up logging, and registers all tools with
    the FastMCP runtime.
    """

    config = get_config()
    configure_logging(config.log_level)
    # Fail at startup rather than on the first zoned call.
    resolve_timezone(config.timezone)

    try:
        from fastmcp import FastMCP
    except Exception as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "fastmcp is not installed. Install with 'pip install common-date-formats[mcp]'"
        ) from exc

    app = FastMCP("common-date-formats")
    _register_fastmcp_tools(app)
    logger.info("Serving date tools (timezone=%s)", config.timezone or "local")

    # Run the FastMCP app (serves until interrupted)
    app.run()


if __name__ == "__main__":  # pragma: no cover
    main()
