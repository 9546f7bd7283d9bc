from .infer import InferenceCache, SchemaUpdater, infer_args
from .mapper import to_fragment
from .merge import merge
from .provider import CallableProvider, CommandProvider, SignatureProvider
from .schema import Schema, SchemaProperty
from .signature import (
    ArgumentSignature,
    Language,
    ListType,
    ObjectType,
    ParseError,
    Primitive,
    Resource,
    StringEnum,
    TypeDescriptor,
)

__all__ = [
    "ArgumentSignature",
    "CallableProvider",
    "CommandProvider",
    "InferenceCache",
    "Language",
    "ListType",
    "ObjectType",
    "ParseError",
    "Primitive",
    "Resource",
    "Schema",
    "SchemaProperty",
    "SchemaUpdater",
    "SignatureProvider",
    "StringEnum",
    "TypeDescriptor",
    "infer_args",
    "merge",
    "to_fragment",
]
