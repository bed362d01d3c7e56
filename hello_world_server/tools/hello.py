from ..registry import InvocationResult, ToolDescriptor
from .descriptions import HELLO_DESCRIPTION


async def hello() -> InvocationResult:
    return InvocationResult.text("world")


def hello_tool() -> ToolDescriptor:
    return ToolDescriptor(name="hello", description=HELLO_DESCRIPTION, handler=hello)
