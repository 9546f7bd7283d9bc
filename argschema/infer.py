from __future__ import annotations

import asyncio
import copy
import logging
from typing import List, Optional, Tuple

from argschema.mapper import to_fragment
from argschema.merge import merge
from argschema.provider import SignatureProvider
from argschema.schema import Schema, SchemaProperty, empty_property
from argschema.signature import (
    ArgumentSignature,
    Invalid,
    Language,
    ParseError,
    Valid,
    decode_result,
)

logger = logging.getLogger(__name__)


class InferenceCache:
    """Remembers the last successfully parsed source and its signature, so re-inferring
    unchanged code skips the analyzer. Typically one per editing session."""

    _last: Optional[Tuple[str, List[ArgumentSignature]]]

    def __init__(self):
        self._last = None

    def lookup(self, code: str) -> Optional[List[ArgumentSignature]]:
        if self._last is not None and self._last[0] == code:
            return self._last[1]
        return None

    def store(self, code: str, args: List[ArgumentSignature]):
        self._last = (code, args)

    def clear(self):
        self._last = None


class SchemaUpdater:
    """Keeps a Schema in sync with the entry point of a script as its code changes.

    Calls on the same schema (or sharing a cache) must not be interleaved.
    """

    _provider: SignatureProvider
    _cache: InferenceCache

    def __init__(self, provider: SignatureProvider, cache: Optional[InferenceCache] = None):
        self._provider = provider
        self._cache = cache if cache is not None else InferenceCache()

    @property
    def cache(self) -> InferenceCache:
        return self._cache

    async def update(self, language: str, code: str, schema: Schema):
        """Re-infers `schema` from `code`, in place.

        Args:
            language: One of the Language values; anything else leaves the schema untouched.
            code: Script source.
            schema: Schema to update. User edits that are still compatible with the
                inferred types (descriptions, enums, formats) are preserved.

        Raises:
            ParseError: If the analyzer rejects the code. The schema is left unchanged.
        """

        if not Language.supports(language):
            logger.debug("no analyzer for %s; schema unchanged", language)
            return

        # The analyzers reject empty input.
        if code == "":
            code = " "

        args = self._cache.lookup(code)
        if args is None:
            args = await self._parse(language, code)
            self._cache.store(code, args)
        else:
            logger.debug("signature cache hit")

        _apply(args, schema)

        # Let observers see the updated schema before the caller resumes.
        await asyncio.sleep(0)

    async def _parse(self, language: str, code: str) -> List[ArgumentSignature]:
        await self._provider.initialize()
        logger.debug("parsing %d chars of %s", len(code), language)
        match decode_result(self._provider.parse(language, code)):
            case Invalid(error):
                raise ParseError(error)
            case Valid(args):
                return args


def _apply(args: List[ArgumentSignature], schema: Schema):
    old_props = copy.deepcopy(schema.properties)
    schema.properties = {}
    schema.required = []

    for arg in args:
        old: SchemaProperty = empty_property()
        if arg.name in old_props:
            old = _sorted(old_props[arg.name])

        prop = merge(old, to_fragment(arg.typ))
        prop["default"] = arg.default

        if not arg.has_default and arg.name not in schema.required:
            schema.required.append(arg.name)
        schema.properties[arg.name] = prop


def _sorted(prop: SchemaProperty) -> SchemaProperty:
    return dict(sorted(prop.items()))  # pyright: ignore


async def infer_args(
    provider: SignatureProvider,
    language: str,
    code: str,
    schema: Schema,
    cache: Optional[InferenceCache] = None,
):
    """One-shot form of SchemaUpdater.update()."""
    await SchemaUpdater(provider, cache).update(language, code, schema)
