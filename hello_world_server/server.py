"""
MCP Hello World Server.

Creates an MCP server that an assistant host can launch and connect to. MCP
(Model Context Protocol) is a standard way to give AI assistants access to
external tools and data.

This server has two tools:
- hello: returns "world" (static example)
- polyglot: returns "world" in the language of the input greeting (calls Claude)

RUN:
    python -m hello_world_server
    # or the installed console script
    hello-world-server

stdout carries the JSON-RPC protocol. Anything human-readable goes to stderr;
a stray print() to stdout corrupts the stream and hangs the client.
"""

import asyncio
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import SERVER_NAME, SERVER_VERSION, check_settings
from .registry import InvocationRequest, ToolRegistry
from .tools import build_registry


def create_server(registry: ToolRegistry) -> Server:
    """Bind a registry to a low-level MCP server. The registry is the only validator."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.list_tools()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        request = InvocationRequest(tool_name=name, arguments=arguments or {})
        result = await registry.dispatch(request)
        return result.to_mcp_content()

    return server


async def serve(registry: ToolRegistry) -> None:
    """Serve over stdio until the client closes the stream."""
    server = create_server(registry)
    async with stdio_server() as (read_stream, write_stream):
        # Log to stderr because stdout is reserved for MCP protocol messages
        print("Hello World MCP server is running", file=sys.stderr)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        check_settings()
        registry = build_registry()
        asyncio.run(serve(registry))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Failed to start server: {e!r}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
