"""Type aliases for fieldjson.

This module contains ONLY TypeAlias definitions. It exists so that
_values.py, _handle.py, and _builder.py can share annotations without
importing each other at runtime.
"""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from ._values import JsonArray, JsonObject, Kind, UndefinedType

# Native Python data accepted by to_value() and produced by to_python()
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A plain list of JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A plain dict mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any native JSON value: primitive, list, or dict."""

Scalar: TypeAlias = "str | int | float | bool | None"
"""A Value that is not a container."""

Value: TypeAlias = "Scalar | JsonArray | JsonObject | UndefinedType"
"""Any Value in a tree, including the Undefined sentinel."""

SlotKey: TypeAlias = "str | int"
"""Addresses one slot: an object key or an array index."""

KindSpec: TypeAlias = "Kind | type"
"""A Kind member or the Python type standing for it."""
