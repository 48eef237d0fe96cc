"""Render Value trees as text.

Compact output has no whitespace at all. Pretty output puts each element on
its own line, indented with one tab per level, and closes non-empty
containers on a line of their own:

    {
    	"id": 1,
    	"tags":
    	[
    		"a",
    		"b"
    	]
    }

Strings are written between quotes exactly as stored. The scanner keeps
escape sequences verbatim, so parsed strings come back out unchanged, but a
string built in code that contains a bare quote is not escaped.
"""

from typing import TYPE_CHECKING

from ._constants import INDENT
from ._exceptions import FieldTypeError
from ._values import JsonArray, JsonObject, Undefined

if TYPE_CHECKING:
    from ._types import Value

__all__ = ["serialize"]


def serialize(value: "Value", pretty: bool = False) -> str:  # noqa: FBT001, FBT002
    """Serialize a Value to text.

    Args:
        value: Any defined Value. Containers are rendered at depth 0.
        pretty: Use the indented layout instead of compact output.

    Returns:
        The text rendering.

    Raises:
        FieldTypeError: If value is Undefined or not a JSON value.
    """
    out: list[str] = []
    if isinstance(value, JsonObject):
        _write_object(value, out, pretty, 0)
    elif isinstance(value, JsonArray):
        _write_array(value, out, pretty, 0)
    else:
        out.append(_scalar_text(value))
    return "".join(out)


def _scalar_text(value: "Value") -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, str):
        return f'"{value}"'
    if value is Undefined:
        msg = "cannot serialize Undefined"
        raise FieldTypeError(msg)
    msg = f"cannot serialize value of type {type(value).__name__}"
    raise FieldTypeError(msg)


def _write_value(
    value: "Value", out: list[str], pretty: bool, depth: int  # noqa: FBT001
) -> None:
    if isinstance(value, JsonObject):
        _write_object(value, out, pretty, depth + 1)
    elif isinstance(value, JsonArray):
        _write_array(value, out, pretty, depth + 1)
    else:
        out.append(_scalar_text(value))


def _write_array(
    array: JsonArray, out: list[str], pretty: bool, depth: int  # noqa: FBT001
) -> None:
    out.append("[")
    item_indent = "\n" + INDENT * (depth + 1)
    for index, item in enumerate(array.values):
        if index > 0:
            out.append(",")
        if pretty:
            out.append(item_indent)
        _write_value(item, out, pretty, depth)
    if pretty and array.values:
        out.append("\n" + INDENT * depth)
    out.append("]")


def _write_object(
    obj: JsonObject, out: list[str], pretty: bool, depth: int  # noqa: FBT001
) -> None:
    out.append("{")
    item_indent = "\n" + INDENT * (depth + 1)
    written = 0
    for key, item in obj.properties.items():
        if written > 0:
            out.append(",")
        separator = ""
        if pretty:
            out.append(item_indent)
            if isinstance(item, (JsonObject, JsonArray)):
                separator = item_indent
            else:
                separator = " "
        out.append(f'"{key}":{separator}')
        _write_value(item, out, pretty, depth)
        written += 1
    if pretty and written:
        out.append("\n" + INDENT * depth)
    out.append("}")
