"""
Tool registry.

Holds every tool the server exposes and routes invocation requests to them.

HOW A CALL FLOWS:
  1. The session hands over an InvocationRequest (tool name + raw arguments).
  2. dispatch() looks the tool up. Unknown names get a textual reply.
  3. The raw arguments are validated against the tool's ParamSpecs by a
     pydantic model built once at registration time. Bad arguments also get
     a textual reply, never an exception.
  4. The handler runs with the validated arguments as keyword arguments and
     its InvocationResult is returned untouched.
"""

import sys
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Tuple, Type

import mcp.types as types
from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model


# ── Reply envelope ─────────────────────────────────────────────────────


class TextBlock(BaseModel):
    """A content block carrying plain text."""

    kind: Literal["text"] = "text"
    payload: str


# Only text blocks exist today. New kinds get their own model with a distinct
# `kind` literal and are added here as a discriminated Union.
ContentBlock = TextBlock


class InvocationResult(BaseModel):
    """The only shape a handler may return and the session may send back."""

    content: List[ContentBlock]

    @classmethod
    def text(cls, payload: str) -> "InvocationResult":
        return cls(content=[TextBlock(payload=payload)])

    def to_mcp_content(self) -> List[types.TextContent]:
        return [types.TextContent(type="text", text=block.payload) for block in self.content]


class InvocationRequest(BaseModel):
    tool_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


# ── Tool descriptions ──────────────────────────────────────────────────

ParamType = Literal["string", "integer", "number", "boolean"]

_PY_TYPES: Dict[str, type] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
}

Handler = Callable[..., Awaitable[InvocationResult]]


class ParamSpec(BaseModel):
    """One declared parameter: its JSON type, guidance text and whether it is required."""

    model_config = ConfigDict(frozen=True)

    type: ParamType
    description: str = ""
    required: bool = True


class ToolDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    params: Dict[str, ParamSpec] = Field(default_factory=dict)
    handler: Handler

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema advertised to MCP clients in tools/list."""
        properties = {
            name: {"type": spec.type, "description": spec.description}
            for name, spec in self.params.items()
        }
        schema: Dict[str, Any] = {"type": "object", "properties": properties}
        required = [name for name, spec in self.params.items() if spec.required]
        if required:
            schema["required"] = required
        return schema


class DuplicateToolError(ValueError):
    """Two tools were registered under the same name."""


def build_arguments_model(tool_name: str, params: Dict[str, ParamSpec]) -> Type[BaseModel]:
    """
    Build the pydantic model that validates a tool's raw arguments.

    Strict mode: "42" is not an integer and 42 is not a string. Unknown
    argument names are ignored, the same way the MCP SDKs strip them.
    """
    fields: Dict[str, Tuple[Any, Any]] = {}
    for name, spec in params.items():
        py_type = _PY_TYPES[spec.type]
        if spec.required:
            fields[name] = (py_type, Field(..., description=spec.description))
        else:
            fields[name] = (Optional[py_type], Field(None, description=spec.description))

    return create_model(
        f"{tool_name.title().replace('_', '')}Arguments",
        __config__=ConfigDict(strict=True, extra="ignore"),
        **fields,
    )


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class ToolRegistry:
    """
    In-memory map from tool name to descriptor.

    Filled once at startup and read-only afterwards, so concurrent dispatches
    need no locking.
    """

    def __init__(self):
        # Maps: tool_name -> (descriptor, arguments model)
        self._tools: Dict[str, Tuple[ToolDescriptor, Type[BaseModel]]] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {descriptor.name}")
        model = build_arguments_model(descriptor.name, descriptor.params)
        self._tools[descriptor.name] = (descriptor, model)

    def __len__(self) -> int:
        return len(self._tools)

    def get(self, name: str) -> Optional[ToolDescriptor]:
        entry = self._tools.get(name)
        return entry[0] if entry else None

    def descriptors(self) -> List[ToolDescriptor]:
        return [descriptor for descriptor, _ in self._tools.values()]

    def list_tools(self) -> List[types.Tool]:
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema(),
            )
            for descriptor in self.descriptors()
        ]

    async def dispatch(self, request: InvocationRequest) -> InvocationResult:
        entry = self._tools.get(request.tool_name)
        if entry is None:
            print(f"[Registry] Unknown tool requested: {request.tool_name}", file=sys.stderr)
            return InvocationResult.text(f"Unknown tool: {request.tool_name}")

        descriptor, model = entry
        try:
            validated = model.model_validate(request.arguments or {})
        except ValidationError as e:
            details = _format_validation_error(e)
            print(f"[Registry] Rejected arguments for {descriptor.name}: {details}", file=sys.stderr)
            return InvocationResult.text(
                f"Invalid arguments for tool '{descriptor.name}': {details}"
            )

        kwargs = {name: getattr(validated, name) for name in descriptor.params}
        return await descriptor.handler(**kwargs)
