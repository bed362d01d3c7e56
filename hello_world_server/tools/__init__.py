from ..config import POLYGLOT_STRUCTURED_OUTPUT
from ..llm import ModelGateway
from ..registry import ToolRegistry
from .hello import hello, hello_tool
from .polyglot import build_prompt, make_polyglot_handler, polyglot_tool


def build_registry(gateway_factory=ModelGateway, structured=POLYGLOT_STRUCTURED_OUTPUT) -> ToolRegistry:
    """Register every tool this server exposes. Raises DuplicateToolError on a name clash."""
    registry = ToolRegistry()
    registry.register(hello_tool())
    registry.register(polyglot_tool(gateway_factory, structured))
    return registry


__all__ = [
    "build_prompt",
    "build_registry",
    "hello",
    "hello_tool",
    "make_polyglot_handler",
    "polyglot_tool",
]
