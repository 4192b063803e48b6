"""fit-common document MCP server."""

__version__ = "2.0.0"
