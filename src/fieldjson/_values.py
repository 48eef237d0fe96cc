"""Value model: kinds, the Undefined sentinel, and the shared containers.

A Value is one of None, bool, int, float, str, JsonArray, JsonObject, or the
Undefined sentinel. Scalars are immutable Python objects. JsonArray and
JsonObject are shared by reference: assigning a container to a second slot
aliases it, and clone() is the only way to get an independent deep copy.
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Final, cast

from ._exceptions import BoundsError, FieldTypeError

if TYPE_CHECKING:
    from ._builder import Entry
    from ._document import Document
    from ._handle import FieldHandle
    from ._types import JSONValue, KindSpec, SlotKey, Value

__all__ = [
    "JsonArray",
    "JsonObject",
    "Kind",
    "Undefined",
    "UndefinedType",
    "default_for",
    "has_field",
    "kind_of",
    "resolve_kind",
    "to_python",
    "to_value",
]


class Kind(Enum):
    """Runtime tag of a Value."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class UndefinedType:
    """Sentinel read from a slot that holds no value."""

    _instance: "UndefinedType | None" = None

    def __new__(cls) -> "UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False


Undefined: Final = UndefinedType()


def kind_of(value: object) -> Kind:
    """Return the Kind of a Value.

    Raises:
        FieldTypeError: If value is not a JSON value.
    """
    if value is Undefined:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    # bool is a subclass of int and must be tested first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, JsonArray):
        return Kind.ARRAY
    if isinstance(value, JsonObject):
        return Kind.OBJECT
    msg = f"unsupported value type: {type(value).__name__}"
    raise FieldTypeError(msg)


def resolve_kind(spec: "KindSpec") -> Kind:
    """Map a Kind or a Python type to a Kind.

    Args:
        spec: A Kind member, or one of bool, int, float, str, type(None),
            JsonArray, JsonObject.

    Returns:
        The matching Kind.

    Raises:
        FieldTypeError: If spec names no Kind.
    """
    if isinstance(spec, Kind):
        return spec
    kind = _KIND_BY_TYPE.get(spec)
    if kind is None:
        msg = f"no JSON kind for {spec!r}"
        raise FieldTypeError(msg)
    return kind


def default_for(kind: Kind) -> "Value":
    """Return a fresh default value of the given kind."""
    if kind is Kind.ARRAY:
        return JsonArray()
    if kind is Kind.OBJECT:
        return JsonObject()
    if kind is Kind.UNDEFINED:
        msg = "Undefined has no default value"
        raise FieldTypeError(msg)
    return _SCALAR_DEFAULTS[kind]


def to_value(obj: object) -> "Value":
    """Convert native Python data into a Value.

    Containers that are already JsonArray/JsonObject are returned as-is, so
    storing them aliases. Dicts become fresh JsonObjects; lists and tuples
    are passed to build() and may therefore contain Entry items.

    Raises:
        FieldTypeError: If obj (or anything nested in it) is not JSON data.
    """
    if obj is Undefined or obj is None:
        return obj
    if isinstance(obj, (bool, int, float, str, JsonArray, JsonObject)):
        return obj
    if isinstance(obj, Mapping):
        mapping = cast("Mapping[object, object]", obj)
        result = JsonObject()
        for key, item in mapping.items():
            if not isinstance(key, str):
                msg = f"object keys must be strings, got {type(key).__name__}"
                raise FieldTypeError(msg)
            result.insert(key, item)
        return result
    if isinstance(obj, (list, tuple)):
        from ._builder import build  # noqa: PLC0415

        return build(cast("Iterable[object]", obj))
    msg = f"unsupported value type: {type(obj).__name__}"
    raise FieldTypeError(msg)


def to_python(value: "Value") -> "JSONValue":
    """Convert a Value tree into plain dicts, lists, and scalars."""
    if isinstance(value, JsonObject):
        return {key: to_python(item) for key, item in value.properties.items()}
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.values]
    if value is Undefined:
        msg = "Undefined has no Python equivalent"
        raise FieldTypeError(msg)
    return cast("JSONValue", value)


def _clone(value: "Value") -> "Value":
    if isinstance(value, (JsonArray, JsonObject)):
        return value.clone()
    return value


def _stored(value: object) -> "Value":
    converted = to_value(value)
    if converted is Undefined:
        msg = "Undefined cannot be stored in a container"
        raise FieldTypeError(msg)
    return converted


class JsonArray:
    """An ordered, index-addressable sequence of Values.

    Indexing returns a FieldHandle on the slot; iteration yields the stored
    values themselves.
    """

    __slots__ = ("values",)

    values: "list[Value]"

    def __init__(self, values: "Iterable[object] | None" = None) -> None:
        self.values = []
        if values is not None:
            for item in values:
                self.values.append(_stored(item))

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            msg = f"array indices must be integers, got {type(index).__name__}"
            raise FieldTypeError(msg)
        if index < 0 or index >= len(self.values):
            raise BoundsError(index, len(self.values))
        return index

    def __getitem__(self, index: int) -> "FieldHandle":
        """Return a mutable handle on an existing element.

        Raises:
            BoundsError: If index is negative or past the end.
        """
        from ._handle import FieldHandle  # noqa: PLC0415

        return FieldHandle(self, self._check_index(index))

    def __setitem__(self, index: int, value: object) -> None:
        self.values[self._check_index(index)] = _stored(value)

    def __delitem__(self, index: int) -> None:
        del self.values[self._check_index(index)]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> "Iterator[Value]":
        return iter(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self.values == other.values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonArray({self.values!r})"

    def get(self, index: int) -> "FieldHandle | None":
        """Return a read-only handle on an element, or None if out of range."""
        from ._handle import FieldHandle  # noqa: PLC0415

        if not self.has(index):
            return None
        return FieldHandle(self, index, read_only=True)

    def has(self, index: int, kind: "KindSpec | None" = None) -> bool:
        """Check whether an element exists, optionally of a given kind."""
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if index < 0 or index >= len(self.values):
            return False
        return kind is None or kind_of(self.values[index]) is resolve_kind(kind)

    def append(self, value: object) -> None:
        self.values.append(_stored(value))

    def add_value(self) -> "FieldHandle":
        """Return a handle on a new trailing slot.

        Each handle appends its own element when it is first written to, so
        handles taken before any of them writes never share a slot.
        """
        from ._handle import FieldHandle  # noqa: PLC0415

        return FieldHandle(self, len(self.values), pending=True)

    def copy(self) -> "JsonArray":
        """Return a new array sharing the same elements."""
        result = JsonArray()
        result.values = list(self.values)
        return result

    def clone(self) -> "JsonArray":
        """Return a deep copy that shares no containers with this array."""
        result = JsonArray()
        result.values = [_clone(item) for item in self.values]
        return result

    def to_python(self) -> "list[JSONValue]":
        return [to_python(item) for item in self.values]


class JsonObject:
    """A mapping from string keys to Values.

    Key order is not semantically significant. Indexing returns a mutable
    FieldHandle; a missing key reads as Undefined until the handle writes it.
    """

    __slots__ = ("properties",)

    properties: "dict[str, Value]"

    def __init__(self, properties: "Mapping[str, object] | None" = None) -> None:
        self.properties = {}
        if properties is not None:
            for key, item in properties.items():
                self.insert(key, item)

    @classmethod
    def from_entries(cls, entries: "Iterable[Entry | object]") -> "JsonObject":
        """Build an object from keyed entries.

        Only an Object-shaped sequence (first entry keyed) contributes
        properties; anything else yields an empty object.
        """
        from ._builder import build  # noqa: PLC0415

        built = build(entries)
        if isinstance(built, JsonObject):
            return built
        return cls()

    def __getitem__(self, key: str) -> "FieldHandle":
        from ._handle import FieldHandle  # noqa: PLC0415

        return FieldHandle(self, key)

    def __setitem__(self, key: str, value: object) -> None:
        converted = to_value(value)
        if converted is Undefined:
            _ = self.properties.pop(key, None)
        else:
            self.properties[key] = converted

    def __delitem__(self, key: str) -> None:
        del self.properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __len__(self) -> int:
        return len(self.properties)

    def __iter__(self) -> "Iterator[str]":
        return iter(self.properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self.properties == other.properties

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonObject({self.properties!r})"

    def get(self, key: str) -> "FieldHandle | None":
        """Return a read-only handle on a property, or None if it is absent."""
        from ._handle import FieldHandle  # noqa: PLC0415

        if key not in self.properties:
            return None
        return FieldHandle(self, key, read_only=True)

    def has(self, key: str, kind: "KindSpec | None" = None) -> bool:
        """Check whether a property exists, optionally of a given kind."""
        if key not in self.properties:
            return False
        return kind is None or kind_of(self.properties[key]) is resolve_kind(kind)

    def insert(self, key: str, value: object) -> bool:
        """Store value under key unless the key is already present.

        Returns:
            True if the value was stored, False if an existing value was kept.
        """
        if key in self.properties:
            return False
        self.properties[key] = _stored(value)
        return True

    def keys(self) -> "list[str]":
        return list(self.properties)

    def items(self) -> "list[tuple[str, Value]]":
        return list(self.properties.items())

    def copy(self) -> "JsonObject":
        """Return a new object sharing the same property values."""
        result = JsonObject()
        result.properties = dict(self.properties)
        return result

    def clone(self) -> "JsonObject":
        """Return a deep copy that shares no containers with this object."""
        result = JsonObject()
        result.properties = {
            key: _clone(item) for key, item in self.properties.items()
        }
        return result

    def to_python(self) -> "dict[str, JSONValue]":
        return {key: to_python(item) for key, item in self.properties.items()}


def has_field(
    container: "JsonObject | JsonArray | Document",
    key: "SlotKey",
    kind: "KindSpec | None" = None,
) -> bool:
    """Check whether a container or Document holds a slot.

    Args:
        container: The object, array, or Document to look in.
        key: A property name for objects and Documents, an index for arrays.
        kind: If given, the slot must also hold a value of this kind.
    """
    if isinstance(container, JsonArray):
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return container.has(key, kind)
    if not isinstance(key, str):
        return False
    return container.has(key, kind)


_KIND_BY_TYPE: "dict[object, Kind]" = {
    type(None): Kind.NULL,
    bool: Kind.BOOLEAN,
    int: Kind.INTEGER,
    float: Kind.FLOAT,
    str: Kind.STRING,
    JsonArray: Kind.ARRAY,
    JsonObject: Kind.OBJECT,
}

_SCALAR_DEFAULTS: "dict[Kind, Value]" = {
    Kind.NULL: None,
    Kind.BOOLEAN: False,
    Kind.INTEGER: 0,
    Kind.FLOAT: 0.0,
    Kind.STRING: "",
}
