from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue

# Plain recursive value produced by the extractor: str, int, float, bool,
# None, list or str-keyed dict.
ExtractedValue = JsonValue


class Position(BaseModel):
    row: int
    column: int


class AnnotationMatch(BaseModel):
    """A ``Metadata(...)`` decorator located on a class, by byte span."""

    model_config = ConfigDict(frozen=True)

    class_name: str
    start_byte: int
    end_byte: int
    start_point: Position


class SourceEdit(BaseModel):
    """Remove ``source[start_byte:end_byte]`` during code generation."""

    model_config = ConfigDict(frozen=True)

    start_byte: int
    end_byte: int


class EnvInfo(BaseModel):
    context: str


class MetadataRecord(BaseModel):
    name: JsonValue
    attributes: dict[str, JsonValue] = Field(default_factory=dict)
    env: EnvInfo

    @property
    def thumbnail(self) -> JsonValue:
        return self.attributes.get("thumbnail")

    def to_document(self) -> dict[str, Any]:
        """Return the artifact body: ``name`` first, user fields, ``env`` last."""
        document: dict[str, Any] = {"name": self.name}
        document.update(self.attributes)
        document["env"] = self.env.model_dump()
        return document


class Artifact(BaseModel):
    name: str
    content: str


class TransformResult(BaseModel):
    source: str
    artifacts: list[Artifact] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
