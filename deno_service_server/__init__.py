"""Deno Service Server -- MCP tools for scaffolding and deploying Deno services."""

__version__ = "0.1.0"
