"""MCP tool layer: argument validation, handlers, and the tool registry."""
