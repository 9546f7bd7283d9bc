from __future__ import annotations

from typing import Dict, Optional

from argschema.schema import SchemaProperty
from argschema.signature import (
    ListType,
    ObjectType,
    Primitive,
    Resource,
    StringEnum,
    TypeDescriptor,
)

# Keywords that map onto a fixed fragment.
_primitives: Dict[str, SchemaProperty] = {
    "int": {"type": "integer"},
    "float": {"type": "number"},
    "bool": {"type": "boolean"},
    "email": {"type": "string", "format": "email"},
    "sql": {"type": "string", "format": "sql"},
    "yaml": {"type": "string", "format": "yaml"},
    "bytes": {"type": "string", "contentEncoding": "base64"},
    "datetime": {"type": "string", "format": "date-time"},
}


def to_fragment(typ: Optional[TypeDescriptor]) -> SchemaProperty:
    """Computes the schema fragment for a type descriptor.

    The result depends on the descriptor alone; reconciling it with what the user
    already has is merge()'s job. Anything unrecognized becomes a plain object.
    """

    match typ:
        case Primitive(name) if name in _primitives:
            return dict(_primitives[name])  # pyright: ignore

        case ObjectType(fields):
            frag: SchemaProperty = {"type": "object"}
            if fields is not None:
                # Nested fields never inherit anything from a prior schema.
                frag["properties"] = {key: to_fragment(ftyp) for key, ftyp in fields}
            return frag

        case StringEnum(choices):
            frag = {"type": "string"}
            if choices is not None:
                frag["enum"] = list(choices)
            return frag

        case Resource(name):
            return {"type": "object", "format": f"resource-{name}"}

        case ListType(element):
            return {"type": "array", "items": _item_fragment(element)}

    # Includes Primitive("string"): plain strings come through as StringEnum(None).
    return {"type": "object"}


def _item_fragment(element: Optional[TypeDescriptor]) -> SchemaProperty:
    match element:
        case Primitive("int" | "float"):
            return {"type": "number"}
        case Primitive("bytes"):
            return {"type": "string", "contentEncoding": "base64"}
        case Primitive("string"):
            return {"type": "string"}
        case StringEnum(choices):
            items: SchemaProperty = {"type": "string"}
            if choices is not None:
                items["enum"] = list(choices)
            return items
    return {"type": "object"}
