"""
Response schemas for structured model output.

A ResponseSchema pairs a pydantic model with the name the model is told to
use for the structure. The name must always travel with the schema: the
provider recovers field names noticeably worse when it is missing.
"""

from typing import Any, Dict, List, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field


class PolyglotResult(BaseModel):
    """What the structured variant of polyglot asks the model to produce."""

    model_config = ConfigDict(populate_by_name=True)

    detected_language: str = Field(
        alias="detectedLanguage",
        description="The language the greeting is written in, e.g. 'French'",
    )
    greeting: str = Field(
        description="The original greeting, echoed back exactly as received",
    )
    world_translation: str = Field(
        alias="worldTranslation",
        description="The word 'world' translated into the detected language, one word only",
    )
    language_family: str = Field(
        alias="languageFamily",
        description="The language family of the detected language, e.g. 'Romance'",
    )


class ResponseSchema:
    """A named, validated shape for structured model output."""

    def __init__(self, name: str, model: Type[BaseModel], description: str = ""):
        self.name = name
        self.model = model
        self.description = description or (model.__doc__ or "").strip()

    @property
    def fields(self) -> List[Tuple[str, str]]:
        """(wire name, guidance) pairs in declaration order."""
        return [
            (info.alias or name, info.description or "")
            for name, info in self.model.model_fields.items()
        ]

    def json_schema(self) -> Dict[str, Any]:
        return self.model.model_json_schema(by_alias=True)

    def validate(self, data: Any) -> BaseModel:
        """Raises pydantic.ValidationError when data does not fit the schema."""
        return self.model.model_validate(data)


POLYGLOT_SCHEMA = ResponseSchema(
    name="polyglot_response",
    model=PolyglotResult,
    description="Language detection and translation of the word 'world' for a greeting",
)
