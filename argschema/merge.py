from __future__ import annotations

import copy
from typing import Any, Optional

from argschema.schema import SchemaProperty


def merge(old: SchemaProperty, new: SchemaProperty) -> SchemaProperty:
    """Merges a freshly inferred fragment into an existing (possibly user-edited) property.

    Fields from `new` always win. Of the fields only `old` has, the ones that still make
    sense for the new type survive: the description always, a format unless it was a
    date-time the new type no longer has, and items while the item type is unchanged.
    String item lists keep their old items verbatim, so user-chosen enums and formats
    survive re-inference. Neither argument is modified.
    """

    merged: SchemaProperty = copy.deepcopy(old)

    if old.get("type") != new.get("type"):
        for key in list(merged.keys()):
            if key != "description":
                del merged[key]  # pyright: ignore
    elif old.get("format") == "date-time" and new.get("format") != "date-time":
        merged.pop("format", None)
    elif _items_type(old) != _items_type(new):
        merged.pop("items", None)

    kept_items = None
    if _items_type(old) == "string" and _items_type(new) == "string":
        kept_items = copy.deepcopy(old["items"])  # pyright: ignore

    merged.update(copy.deepcopy(new))
    if kept_items is not None:
        merged["items"] = kept_items

    # A resource binding only means something on an object.
    fmt = merged.get("format")
    if isinstance(fmt, str) and fmt.startswith("resource-") and new.get("type") != "object":
        del merged["format"]

    return merged


def _items_type(prop: SchemaProperty) -> Optional[Any]:
    items = prop.get("items")
    if items is None:
        return None
    return items.get("type")
