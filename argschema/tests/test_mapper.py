from argschema.mapper import to_fragment
from argschema.signature import ListType, ObjectType, Primitive, Resource, StringEnum


def test_basic_types():
    assert to_fragment(Primitive("int")) == {"type": "integer"}
    assert to_fragment(Primitive("float")) == {"type": "number"}
    assert to_fragment(Primitive("bool")) == {"type": "boolean"}
    assert to_fragment(Primitive("datetime")) == {"type": "string", "format": "date-time"}
    assert to_fragment(Primitive("bytes")) == {
        "type": "string",
        "contentEncoding": "base64",
    }


def test_string_formats():
    for fmt in ["email", "sql", "yaml"]:
        assert to_fragment(Primitive(fmt)) == {"type": "string", "format": fmt}


def test_enum():
    assert to_fragment(StringEnum()) == {"type": "string"}
    assert to_fragment(StringEnum(["red", "green"])) == {
        "type": "string",
        "enum": ["red", "green"],
    }


def test_resource():
    assert to_fragment(Resource("postgresql")) == {
        "type": "object",
        "format": "resource-postgresql",
    }


def test_fallback():
    assert to_fragment(None) == {"type": "object"}
    assert to_fragment(Primitive("unknown")) == {"type": "object"}
    assert to_fragment(Primitive("string")) == {"type": "object"}


def test_list_items():
    def items(elem):
        frag = to_fragment(ListType(elem))
        assert frag["type"] == "array"
        return frag["items"]

    assert items(Primitive("int")) == {"type": "number"}
    assert items(Primitive("float")) == {"type": "number"}
    assert items(Primitive("bytes")) == {"type": "string", "contentEncoding": "base64"}
    assert items(Primitive("string")) == {"type": "string"}
    assert items(StringEnum(["a", "b"])) == {"type": "string", "enum": ["a", "b"]}
    assert items(StringEnum()) == {"type": "string"}
    assert items(Primitive("bool")) == {"type": "object"}
    assert items(ObjectType([("x", Primitive("int"))])) == {"type": "object"}
    assert items(None) == {"type": "object"}


def test_nested_object():
    typ = ObjectType(
        [
            ("name", StringEnum()),
            ("age", Primitive("int")),
            (
                "address",
                ObjectType([("street", StringEnum()), ("zip", Primitive("int"))]),
            ),
        ]
    )

    frag = to_fragment(typ)
    assert frag["type"] == "object"

    props = frag["properties"]
    assert list(props.keys()) == ["name", "age", "address"]
    assert props["name"] == {"type": "string"}
    assert props["age"] == {"type": "integer"}
    assert list(props["address"]["properties"].keys()) == ["street", "zip"]
    assert props["address"]["properties"]["zip"] == {"type": "integer"}


def test_object_without_fields():
    assert to_fragment(ObjectType()) == {"type": "object"}
    assert to_fragment(ObjectType([])) == {"type": "object", "properties": {}}


def test_fragments_are_fresh():
    # Mutating one result must not leak into the next.
    frag = to_fragment(Primitive("int"))
    frag["description"] = "changed"
    assert to_fragment(Primitive("int")) == {"type": "integer"}

    choices = ["a"]
    frag = to_fragment(StringEnum(choices))
    frag["enum"].append("b")
    assert choices == ["a"]
