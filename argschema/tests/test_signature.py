import json

import pytest

from argschema.signature import (
    ArgumentSignature,
    Invalid,
    Language,
    ListType,
    ObjectType,
    Primitive,
    Resource,
    StringEnum,
    Valid,
    decode_result,
    decode_type,
)


def test_decode_types():
    assert decode_type("int") == Primitive("int")
    assert decode_type({"str": None}) == StringEnum()
    assert decode_type({"str": ["a", "b"]}) == StringEnum(["a", "b"])
    assert decode_type({"resource": "postgresql"}) == Resource("postgresql")
    assert decode_type({"list": "bytes"}) == ListType(Primitive("bytes"))
    assert decode_type({"list": {"str": ["x"]}}) == ListType(StringEnum(["x"]))
    assert decode_type({"list": None}) == ListType()
    assert decode_type({"object": None}) == ObjectType()
    assert decode_type({"object": [{"key": "a", "typ": "float"}]}) == ObjectType(
        [("a", Primitive("float"))]
    )


def test_decode_unknown():
    assert decode_type(None) is None
    assert decode_type({"dynselect": "x"}) is None
    assert decode_type(42) is None


def test_decode_valid():
    raw = json.dumps(
        {
            "type": "Valid",
            "args": [
                {"name": "a", "typ": "int", "default": None, "has_default": False},
                {"name": "b", "typ": {"str": None}, "default": "x", "has_default": True},
            ],
        }
    )
    assert decode_result(raw) == Valid(
        [
            ArgumentSignature("a", Primitive("int")),
            ArgumentSignature("b", StringEnum(), "x", True),
        ]
    )


def test_decode_invalid():
    raw = json.dumps({"type": "Invalid", "error": "unexpected token"})
    assert decode_result(raw) == Invalid("unexpected token")


def test_decode_malformed():
    with pytest.raises(json.JSONDecodeError):
        decode_result("not json")
    with pytest.raises(KeyError):
        decode_result(json.dumps({"type": "Valid"}))
    with pytest.raises(ValueError):
        decode_result(json.dumps({"type": "Maybe"}))


def test_languages():
    assert Language.supports("python3")
    assert Language.supports("deno")
    assert Language.supports("go")
    assert Language.supports("bash")
    assert not Language.supports("rust")
    assert not Language.supports("")
