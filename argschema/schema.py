from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NotRequired, TypedDict

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class SchemaProperty(TypedDict):
    """JSON-schema description of a single argument. Every key is optional, since
    properties are built up and trimmed field by field as the signature changes."""

    type: NotRequired[str]
    format: NotRequired[str]
    enum: NotRequired[List[Any]]
    items: NotRequired[SchemaProperty]
    properties: NotRequired[Dict[str, SchemaProperty]]
    default: NotRequired[Any]
    description: NotRequired[str]
    contentEncoding: NotRequired[str]


@dataclass
class Schema:
    """Argument schema for a script's entry point.

    The order of `properties` is the order of the arguments, and `required` lists the
    arguments without a default in that same order."""

    properties: Dict[str, SchemaProperty] = field(default_factory=lambda: {})
    required: List[str] = field(default_factory=lambda: [])

    def to_json(self) -> Dict[str, Any]:
        return {
            "$schema": JSON_SCHEMA_DIALECT,
            "type": "object",
            "properties": self.properties,
            "required": self.required,
        }

    @staticmethod
    def from_json(d: Dict[str, Any]) -> Schema:
        if d.get("type", "object") != "object":
            raise ValueError(f"expected an object schema; got {d['type']}")
        return Schema(
            properties=dict(d.get("properties") or {}),
            required=list(d.get("required") or []),
        )


def empty_property() -> SchemaProperty:
    return {"type": "", "description": ""}
