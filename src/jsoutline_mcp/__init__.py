"""Outline extraction for JavaScript source, served over MCP."""

__version__ = "0.1.0"
