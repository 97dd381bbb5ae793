"""common-date-formats package.

Formats MySQL-style date and datetime strings (``2011-01-02`` or
``2011-01-02 01:02:03``) into the shapes web pages and feeds need:
RSS dates, US-English long form, sortable integer keys, W3C/ISO 8601
and a compact CMS list form.

No formatter is imported by default. Import them explicitly:
    from common_date_formats.formats import format_date_rss, format_date_w3c
or all at once:
    from common_date_formats.formats import *

The formatters can also be served as MCP tools (see `server.py`).
"""

__all__ = [
    "__version__",
]

__version__ = "0.2.0"
