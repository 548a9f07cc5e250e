"""MCP stdio server exposing the Deno service tools.

Wires the ``ToolRegistry`` into the low-level ``mcp`` server:

* ``tools/list`` returns every registered ``ToolDescriptor``.
* ``tools/call`` is registered directly on the request table so that
  validation and routing failures reach the client as JSON-RPC errors, while
  handler failures come back as results flagged ``isError``.

Usage::

    deno-service-server              # serve over stdio
    deno-service-server --list       # print the tools and exit
"""

from __future__ import annotations

import argparse
import asyncio
import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from deno_service_server import __version__
from deno_service_server.config import ProcessConfig
from deno_service_server.errors import InternalToolError, ToolError
from deno_service_server.tools.registry import ToolDescriptor, ToolRegistry, build_registry
from deno_service_server.tools.results import ToolResult
from deno_service_server.utils import console, print_summary_table, setup_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "deno-service-server"


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


# ---------------------------------------------------------------------------
# Server construction
# ---------------------------------------------------------------------------


def create_server(registry: ToolRegistry) -> Server:
    """Build an MCP ``Server`` backed by *registry*."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return [to_mcp_tool(descriptor) for descriptor in registry.list_tools()]

    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await registry.dispatch(req.params.name, req.params.arguments)
        except ToolError as exc:
            logger.warning("Rejected %s: %s", req.params.name, exc.message)
            raise McpError(exc.to_error_data()) from exc
        except Exception as exc:
            logger.exception("Unexpected failure dispatching %s", req.params.name)
            error = InternalToolError(str(exc) or "Unknown error occurred")
            raise McpError(error.to_error_data()) from exc
        return types.ServerResult(to_call_tool_result(result))

    server.request_handlers[types.CallToolRequest] = _call_tool
    return server


async def serve(config: ProcessConfig) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(build_registry(config))
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Deno Service MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server that scaffolds Deno web services and Render configs",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available tools and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $DENO_SERVICE_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``deno-service-server``."""
    args = parse_args(argv)
    config = ProcessConfig.from_env()
    if args.log_level:
        config = config.model_copy(update={"log_level": args.log_level.upper()})
    setup_logging(config.log_level)

    if args.list:
        tools = build_registry(config).list_tools()
        print_summary_table(
            {tool.name: tool.description for tool in tools},
            title=f"{SERVER_NAME} {__version__}",
        )
        return

    if not config.api_key_present:
        logger.warning("RENDER_API_KEY is not set; render configs will carry a reminder")
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        console.print("[bold yellow]Interrupted.[/bold yellow]")


if __name__ == "__main__":
    main()
