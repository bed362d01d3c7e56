import pytest
from pydantic import ValidationError

from hello_world_server.registry import (
    DuplicateToolError,
    InvocationRequest,
    InvocationResult,
    ParamSpec,
    TextBlock,
    ToolDescriptor,
    ToolRegistry,
    build_arguments_model,
)


async def _noop() -> InvocationResult:
    return InvocationResult.text("ok")


class TestRegister:
    def test_duplicate_name_is_rejected(self):
        registry = ToolRegistry()
        registry.register(ToolDescriptor(name="dup", description="first", handler=_noop))

        with pytest.raises(DuplicateToolError):
            registry.register(ToolDescriptor(name="dup", description="second", handler=_noop))

        assert len(registry) == 1
        assert registry.get("dup").description == "first"

    def test_input_schema_lists_params_and_required(self, echo_registry):
        schema = echo_registry.get("echo").input_schema()

        assert schema["type"] == "object"
        assert schema["properties"]["text"] == {"type": "string", "description": "What to echo"}
        assert schema["properties"]["times"]["type"] == "integer"
        assert schema["required"] == ["text"]

    def test_no_params_gives_empty_object_schema(self):
        descriptor = ToolDescriptor(name="bare", description="", handler=_noop)
        assert descriptor.input_schema() == {"type": "object", "properties": {}}

    def test_list_tools_returns_mcp_tools(self, echo_registry):
        tools = echo_registry.list_tools()

        assert [t.name for t in tools] == ["echo"]
        assert tools[0].description == "Echo the text back"
        assert tools[0].inputSchema["required"] == ["text"]


class TestDispatch:
    @pytest.mark.asyncio
    async def test_valid_call_reaches_handler(self, echo_registry):
        result = await echo_registry.dispatch(
            InvocationRequest(tool_name="echo", arguments={"text": "hi", "times": 2})
        )

        assert result == InvocationResult(content=[TextBlock(payload="hix2")])
        assert echo_registry.calls == [("hi", 2)]

    @pytest.mark.asyncio
    async def test_handler_result_is_passed_through_unmodified(self):
        expected = InvocationResult(content=[TextBlock(payload="a"), TextBlock(payload="b")])

        async def handler():
            return expected

        registry = ToolRegistry()
        registry.register(ToolDescriptor(name="multi", description="", handler=handler))

        result = await registry.dispatch(InvocationRequest(tool_name="multi"))
        assert result is expected

    @pytest.mark.asyncio
    async def test_optional_param_defaults_to_none(self, echo_registry):
        result = await echo_registry.dispatch(
            InvocationRequest(tool_name="echo", arguments={"text": "hi"})
        )

        assert result.content[0].payload == "hixNone"

    @pytest.mark.asyncio
    async def test_unknown_tool_returns_text_result(self, echo_registry):
        result = await echo_registry.dispatch(InvocationRequest(tool_name="nope"))

        assert isinstance(result, InvocationResult)
        assert result.content[0].kind == "text"
        assert result.content[0].payload == "Unknown tool: nope"
        assert echo_registry.calls == []

    @pytest.mark.asyncio
    async def test_missing_required_argument_is_reported(self, echo_registry):
        result = await echo_registry.dispatch(InvocationRequest(tool_name="echo", arguments={}))

        payload = result.content[0].payload
        assert payload.startswith("Invalid arguments for tool 'echo':")
        assert "text" in payload
        assert echo_registry.calls == []

    @pytest.mark.asyncio
    async def test_wrong_type_is_not_coerced(self, echo_registry):
        result = await echo_registry.dispatch(
            InvocationRequest(tool_name="echo", arguments={"text": 42})
        )

        assert result.content[0].payload.startswith("Invalid arguments for tool 'echo':")
        assert echo_registry.calls == []

    @pytest.mark.asyncio
    async def test_unknown_arguments_are_ignored(self, echo_registry):
        result = await echo_registry.dispatch(
            InvocationRequest(tool_name="echo", arguments={"text": "hi", "extra": True})
        )

        assert result.content[0].payload == "hixNone"


def test_arguments_model_is_strict():
    model = build_arguments_model("sample", {"n": ParamSpec(type="integer")})

    assert model.model_validate({"n": 3}).n == 3
    with pytest.raises(ValidationError):
        model.model_validate({"n": "3"})


def test_to_mcp_content():
    content = InvocationResult.text("world").to_mcp_content()

    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text == "world"
