"""MCP tools for formatting dates.

Each tool is exposed as a plain Python function to facilitate testing.
An MCP runtime adapter (see `server.py`) registers these with the
FastMCP runtime. The tool functions return Pydantic models.
"""

from .formatting import format_all, format_one, list_styles

__all__ = [
    "format_one",
    "format_all",
    "list_styles",
]
