"""
Smoke client for the Hello World MCP server.
=============================================
Launches the server as a subprocess over stdio, lists its tools and calls
both of them, the same way an assistant host would.

    python -m hello_world_server.client.demo
    python -m hello_world_server.client.demo hola こんにちは
    hello-world-demo --structured bonjour

PREREQUISITES:
  - ANTHROPIC_API_KEY in the environment (or .env) for the polyglot calls.
    Without it polyglot replies with "Error calling LLM: ..." and hello still works.
"""

import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


def _result_text(result) -> str:
    # MCP returns a list of content blocks (text, image, etc.)
    output_parts = []
    for content_block in result.content:
        if hasattr(content_block, "text"):
            output_parts.append(content_block.text)
        else:
            output_parts.append(str(content_block))
    return "\n".join(output_parts) if output_parts else "Tool returned no output."


async def run_demo(greetings: List[str], structured: bool = False) -> None:
    # stdio_client only forwards a minimal environment by default; the server
    # needs ANTHROPIC_API_KEY and the POLYGLOT_* settings
    env: Dict[str, Any] = dict(os.environ)
    if structured:
        env["POLYGLOT_STRUCTURED_OUTPUT"] = "1"

    server_params = StdioServerParameters(
        command=sys.executable,  # Use the same Python interpreter
        args=["-m", "hello_world_server"],
        env=env,
    )

    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            # Initialize the MCP connection (required handshake)
            await session.initialize()

            tools_result = await session.list_tools()
            print(f"Connected: {len(tools_result.tools)} tool(s) available")
            for tool in tools_result.tools:
                print(f"  {tool.name}: {tool.description}")

            print("\n" + "-" * 60)
            result = await session.call_tool("hello", arguments={})
            print(f"hello() → {_result_text(result)}")

            for greeting in greetings:
                print("-" * 60)
                result = await session.call_tool("polyglot", arguments={"greeting": greeting})
                print(f"polyglot({greeting!r}) → {_result_text(result)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Call the Hello World MCP server tools over stdio")
    parser.add_argument("greetings", nargs="*", default=["bonjour"], help="Greetings to send to polyglot")
    parser.add_argument(
        "--structured",
        action="store_true",
        help="Ask the server for the structured (JSON) polyglot reply",
    )
    args = parser.parse_args()

    asyncio.run(run_demo(args.greetings, structured=args.structured))


if __name__ == "__main__":
    main()
