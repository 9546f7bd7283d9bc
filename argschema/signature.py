from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple, Union


class Language(Enum):
    """Languages with a signature analyzer."""

    PYTHON3 = "python3"
    DENO = "deno"
    GO = "go"
    BASH = "bash"

    @staticmethod
    def supports(language: str) -> bool:
        return language in _LANGUAGES


_LANGUAGES = frozenset(lang.value for lang in Language)


@dataclass(frozen=True)
class Primitive:
    """A bare type keyword: int, float, bool, email, sql, yaml, bytes, datetime or string."""

    name: str


@dataclass(frozen=True)
class ObjectType:
    # None when the analyzer knows the value is an object but not its shape.
    fields: Optional[List[Tuple[str, Optional[TypeDescriptor]]]] = None


@dataclass(frozen=True)
class StringEnum:
    choices: Optional[List[str]] = None


@dataclass(frozen=True)
class Resource:
    name: str


@dataclass(frozen=True)
class ListType:
    element: Optional[TypeDescriptor] = None


TypeDescriptor = Union[Primitive, ObjectType, StringEnum, Resource, ListType]


@dataclass(frozen=True)
class ArgumentSignature:
    """One argument of the analyzed entry point, in declaration order."""

    name: str
    typ: Optional[TypeDescriptor]
    default: Any = None
    has_default: bool = False


@dataclass(frozen=True)
class Valid:
    args: List[ArgumentSignature]


@dataclass(frozen=True)
class Invalid:
    error: str


ParseResult = Union[Valid, Invalid]


class ParseError(Exception):
    """Raised when the analyzer rejects the source code."""


def decode_type(val: Any) -> Optional[TypeDescriptor]:
    """Decodes the analyzer's wire form of a type.

    Bare strings are keywords ("int", "bytes", ...); everything else is a single-key
    object tagged with "object", "str", "resource" or "list". Unknown tags decode to None.
    """

    if isinstance(val, str):
        return Primitive(val)
    if not isinstance(val, dict):
        return None

    if "object" in val:
        props = val["object"]
        if props is None:
            return ObjectType()
        return ObjectType([(p["key"], decode_type(p["typ"])) for p in props])
    elif "str" in val:
        return StringEnum(val["str"])
    elif "resource" in val:
        return Resource(val["resource"])
    elif "list" in val:
        return ListType(decode_type(val["list"]))
    return None


def decode_arg(val: Any) -> ArgumentSignature:
    return ArgumentSignature(
        name=val["name"],
        typ=decode_type(val["typ"]),
        default=val.get("default"),
        has_default=bool(val.get("has_default", False)),
    )


def decode_result(raw: str) -> ParseResult:
    """Decodes the JSON text returned by a SignatureProvider.

    Malformed output is a broken provider, not bad user code, so decoding errors
    (json.JSONDecodeError, KeyError) propagate unchanged.
    """

    rsp = json.loads(raw)
    match rsp["type"]:
        case "Invalid":
            return Invalid(rsp["error"])
        case "Valid":
            return Valid([decode_arg(arg) for arg in rsp["args"]])
        case other:
            raise ValueError(f"unexpected parse result type: {other}")
