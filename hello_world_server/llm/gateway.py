"""
Remote model gateway.

Thin wrapper over the Anthropic SDK with two explicit operations:

- complete(prompt): free-form text, returned as the provider's content
  (a list of typed blocks). Use extract_text() to flatten it.
- complete_structured(prompt, schema): the model is forced to answer through
  a single tool whose input_schema is the response schema, and the answer is
  validated into the schema's pydantic model.

A fresh SDK client is built for every call. Nothing is shared between calls,
so concurrent invocations need no coordination. Provider exceptions are
translated into the GatewayError family; retries are whatever the SDK client
does on its own (max_retries).
"""

import json
import re
from typing import Any, Callable, Optional, Sequence, Union

import anthropic
from pydantic import BaseModel, ValidationError

from ..config import POLYGLOT_MODEL, get_api_key, get_max_retries, get_max_tokens
from ..schemas import ResponseSchema
from .errors import AuthFailure, MalformedModelOutput, SchemaValidationFailure, TransportFailure

ModelContent = Union[str, Sequence[Any]]

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


def _block_field(block: Any, name: str) -> Any:
    """Read a field from an SDK block object or a plain dict."""
    if isinstance(block, dict):
        return block.get(name)
    return getattr(block, name, None)


def extract_text(content: ModelContent) -> str:
    """
    Flatten model content into text.

    A plain string is used verbatim. A sequence of blocks contributes only its
    text blocks, in order. Surrounding whitespace is trimmed.
    """
    if isinstance(content, str):
        return content.strip()
    parts = [
        _block_field(block, "text") or ""
        for block in content
        if _block_field(block, "type") == "text"
    ]
    return "".join(parts).strip()


def _default_client(api_key: str, max_retries: int) -> Any:
    return anthropic.AsyncAnthropic(api_key=api_key, max_retries=max_retries)


class ModelGateway:
    """
    Usage:
        gateway = ModelGateway()
        content = await gateway.complete("Say hi")
        result = await gateway.complete_structured("...", POLYGLOT_SCHEMA)
    """

    def __init__(
        self,
        model: str = POLYGLOT_MODEL,
        max_tokens: Optional[int] = None,
        api_key: Optional[str] = None,
        max_retries: Optional[int] = None,
        client_factory: Optional[Callable[[str, int], Any]] = None,
    ):
        self.model = model
        self.max_tokens = get_max_tokens() if max_tokens is None else max_tokens
        self._api_key = api_key
        self.max_retries = get_max_retries() if max_retries is None else max_retries
        self._client_factory = client_factory or _default_client

    def _client(self) -> Any:
        api_key = self._api_key or get_api_key()
        if not api_key:
            raise AuthFailure("ANTHROPIC_API_KEY is not set")
        return self._client_factory(api_key, self.max_retries)

    async def _create(self, **kwargs) -> Any:
        client = self._client()
        try:
            return await client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                **kwargs,
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            raise AuthFailure(str(e)) from e
        except anthropic.APIConnectionError as e:
            # Also covers APITimeoutError
            raise TransportFailure(str(e) or "Connection error.") from e
        except anthropic.APIStatusError as e:
            raise TransportFailure(str(e)) from e
        except anthropic.AnthropicError as e:
            raise TransportFailure(str(e)) from e

    async def complete(self, prompt: str) -> ModelContent:
        response = await self._create(messages=[{"role": "user", "content": prompt}])
        return response.content

    async def complete_structured(self, prompt: str, schema: ResponseSchema) -> BaseModel:
        tool = {
            "name": schema.name,
            "description": schema.description,
            "input_schema": schema.json_schema(),
        }
        response = await self._create(
            messages=[{"role": "user", "content": prompt}],
            tools=[tool],
            tool_choice={"type": "tool", "name": schema.name},
        )
        data = _structured_payload(response.content, schema.name)
        try:
            return schema.validate(data)
        except ValidationError as e:
            invalid = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise SchemaValidationFailure(
                f"Model output does not match '{schema.name}' (invalid fields: {', '.join(invalid)})"
            ) from e


def _structured_payload(content: ModelContent, schema_name: str) -> Any:
    """Pull the structured data out of a reply: the forced tool call, else JSON text."""
    if not isinstance(content, str):
        for block in content:
            if _block_field(block, "type") == "tool_use" and _block_field(block, "name") == schema_name:
                return _block_field(block, "input")

    text = extract_text(content)
    if not text:
        raise MalformedModelOutput("Model returned no structured data")

    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedModelOutput(f"Model output is not valid JSON: {e.msg}") from e
