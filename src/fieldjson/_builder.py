"""Bulk literal construction of Values.

build() takes an ordered sequence whose items are either Entry(key, value)
or bare values. The first item decides the shape: a keyed first item builds
a JsonObject and every unkeyed item is skipped; otherwise a JsonArray is
built and every keyed item is skipped. Nested lists and tuples are built the
same way, so trees compose without intermediate containers:

    build([
        Entry("name", "alice"),
        Entry("tags", ["admin", "ops"]),
        Entry("limits", [Entry("cpu", 2), Entry("mem", 4.5)]),
    ])
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ._exceptions import FieldTypeError
from ._values import JsonArray, JsonObject, to_value

__all__ = ["Entry", "build"]


@dataclass(frozen=True, slots=True)
class Entry:
    """One keyed item of a build() sequence."""

    key: str
    value: object


def build(entries: "Iterable[Entry | object]") -> "JsonArray | JsonObject":
    """Build an object or array from an ordered sequence of items.

    Args:
        entries: Entry items and/or bare values.

    Returns:
        A JsonObject if the first item is an Entry, otherwise a JsonArray.
        An empty sequence yields an empty JsonArray.

    Raises:
        FieldTypeError: If a value is not JSON data.
    """
    items = list(entries)
    if not items or not isinstance(items[0], Entry):
        array = JsonArray()
        for item in items:
            if isinstance(item, Entry):
                continue
            array.append(item)
        return array

    obj = JsonObject()
    for item in items:
        if not isinstance(item, Entry):
            continue
        if not isinstance(item.key, str):
            msg = f"entry keys must be strings, got {type(item.key).__name__}"
            raise FieldTypeError(msg)
        # First occurrence of a key wins
        _ = obj.insert(item.key, to_value(item.value))
    return obj
