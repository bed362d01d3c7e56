"""Example MCP server exposing the "hello" and "polyglot" tools."""

__version__ = "1.0.0"
