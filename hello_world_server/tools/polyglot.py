"""
The "polyglot" tool.

This is "Claude calling Claude": the host assistant calls this MCP tool, and
the tool asks another Claude instance (through the gateway) which language
the greeting is in and how to say "world" in it.

Two variants, picked at registration time:
- plain: the reply is the single translated word.
- structured: the reply is the validated PolyglotResult as indented JSON.

Any failure of the model call becomes an "Error calling LLM: ..." reply so the
host gets a useful message instead of a protocol error.
"""

import json
import sys
from typing import Any, Callable

from ..config import POLYGLOT_STRUCTURED_OUTPUT
from ..llm import ModelGateway, extract_text
from ..registry import InvocationResult, ParamSpec, ToolDescriptor
from ..schemas import POLYGLOT_SCHEMA
from .descriptions import (
    GREETING_PARAM_DESCRIPTION,
    POLYGLOT_DESCRIPTION,
    POLYGLOT_PLAIN_PROMPT,
    POLYGLOT_STRUCTURED_PROMPT,
)

GatewayFactory = Callable[[], Any]


def build_prompt(greeting: str, structured: bool = False) -> str:
    template = POLYGLOT_STRUCTURED_PROMPT if structured else POLYGLOT_PLAIN_PROMPT
    return template.format(greeting=greeting)


def make_polyglot_handler(
    gateway_factory: GatewayFactory = ModelGateway,
    structured: bool = POLYGLOT_STRUCTURED_OUTPUT,
):
    """
    Build the polyglot handler.

    Args:
        gateway_factory: Called once per invocation to get a gateway. Each call
                         gets its own binding; nothing is reused across calls.
        structured: Use complete_structured() with POLYGLOT_SCHEMA instead of
                    complete().
    """

    async def polyglot(greeting: str) -> InvocationResult:
        # greeting was already checked to be a str by the registry
        prompt = build_prompt(greeting, structured)

        try:
            gateway = gateway_factory()
            if structured:
                result = await gateway.complete_structured(prompt, POLYGLOT_SCHEMA)
                payload = json.dumps(
                    result.model_dump(by_alias=True), indent=2, ensure_ascii=False
                )
            else:
                content = await gateway.complete(prompt)
                payload = extract_text(content)
        except Exception as e:
            # Return error as text so the host gets a useful message
            error_message = str(e) or "Unknown error occurred"
            print(f"[Polyglot] LLM call failed: {error_message}", file=sys.stderr)
            return InvocationResult.text(f"Error calling LLM: {error_message}")

        return InvocationResult.text(payload)

    return polyglot


def polyglot_tool(
    gateway_factory: GatewayFactory = ModelGateway,
    structured: bool = POLYGLOT_STRUCTURED_OUTPUT,
) -> ToolDescriptor:
    return ToolDescriptor(
        name="polyglot",
        description=POLYGLOT_DESCRIPTION,
        params={
            "greeting": ParamSpec(type="string", description=GREETING_PARAM_DESCRIPTION),
        },
        handler=make_polyglot_handler(gateway_factory, structured),
    )
