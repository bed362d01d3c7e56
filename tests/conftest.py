"""
Shared fixtures.

StubGateway stands in for the remote model: it records prompts and answers
with a canned reply or raises a canned error. No test touches the network.
"""

import pytest

from hello_world_server.registry import InvocationResult, ParamSpec, ToolDescriptor, ToolRegistry


class StubGateway:
    def __init__(self, text=None, structured=None, error=None):
        self.text = text
        self.structured = structured
        self.error = error
        self.prompts = []
        self.schemas = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text

    async def complete_structured(self, prompt, schema):
        self.prompts.append(prompt)
        self.schemas.append(schema)
        if self.error is not None:
            raise self.error
        if isinstance(self.structured, dict):
            return schema.validate(self.structured)
        return self.structured


@pytest.fixture
def stub_gateway():
    """Factory fixture: stub_gateway(text=...) returns (gateway, factory)."""

    def _make(**kwargs):
        gateway = StubGateway(**kwargs)
        return gateway, lambda: gateway

    return _make


@pytest.fixture
def french_result():
    return {
        "detectedLanguage": "French",
        "greeting": "bonjour",
        "worldTranslation": "monde",
        "languageFamily": "Romance",
    }


@pytest.fixture
def echo_registry():
    """Registry with a single tool that echoes its typed arguments back."""
    calls = []

    async def echo(text, times=None):
        calls.append((text, times))
        return InvocationResult.text(f"{text}x{times}")

    registry = ToolRegistry()
    registry.register(
        ToolDescriptor(
            name="echo",
            description="Echo the text back",
            params={
                "text": ParamSpec(type="string", description="What to echo"),
                "times": ParamSpec(type="integer", description="Repeat count", required=False),
            },
            handler=echo,
        )
    )
    registry.calls = calls
    return registry
