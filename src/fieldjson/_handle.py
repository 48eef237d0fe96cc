"""Field handles: typed, defaulting, conditional access to one slot of a tree.

A FieldHandle is bound to a slot, that is a container plus a key (for a
JsonObject) or an index (for a JsonArray). The slot need not exist yet: a
handle for a missing key reads as Undefined and creates the key on its first
write, so Undefined is never stored in a container.

Handles come in three flavours:

- mutable (from ``container[key]``): typed reads of a missing slot
  materialize a default value, and writes go through;
- read-only (from ``container.get(key)``): nothing is ever written, and
  typed reads of the wrong kind raise;
- with a fallback (from ``handle.or_(default)``): reads use the fallback when
  the slot is missing or of the wrong kind; nothing is written.

Example:
    doc["server"]["port"].or_(8080).then(bind)
    doc["server"]["hosts"].create_array().append("localhost")
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, cast, overload

from ._exceptions import BoundsError, FieldTypeError, ReadOnlyFieldError
from ._values import (
    JsonArray,
    JsonObject,
    Kind,
    Undefined,
    default_for,
    kind_of,
    resolve_kind,
    to_value,
)

if TYPE_CHECKING:
    from ._types import KindSpec, SlotKey, Value

__all__ = ["FieldHandle"]


class FieldHandle:
    """A reference to one slot in a Value tree."""

    __slots__ = ("_container", "_fallback", "_key", "_pending", "_read_only")

    _container: JsonObject | JsonArray
    _key: "SlotKey"
    _read_only: bool
    _fallback: "Value"
    _pending: bool

    def __init__(
        self,
        container: JsonObject | JsonArray,
        key: "SlotKey",
        *,
        read_only: bool = False,
        fallback: object = Undefined,
        pending: bool = False,
    ) -> None:
        self._container = container
        self._key = key
        self._read_only = read_only
        self._fallback = to_value(fallback)
        self._pending = pending

    def __repr__(self) -> str:
        parts = [f"{self._key!r}", f"{self._read()!r}"]
        if self._fallback is not Undefined:
            parts.append(f"fallback={self._fallback!r}")
        if self._read_only:
            parts.append("read_only=True")
        return f"FieldHandle({', '.join(parts)})"

    # -- Slot access -----------------------------------------------------

    def _read(self) -> "Value":
        if self._pending:
            return Undefined
        container = self._container
        if isinstance(container, JsonObject):
            return container.properties.get(cast("str", self._key), Undefined)
        index = cast("int", self._key)
        if 0 <= index < len(container.values):
            return container.values[index]
        return Undefined

    def _check_writable(self) -> None:
        if self._read_only:
            msg = f"field {self._key!r} is read-only"
            raise ReadOnlyFieldError(msg)
        if self._fallback is not Undefined:
            msg = f"field {self._key!r} has a fallback and cannot be written"
            raise ReadOnlyFieldError(msg)

    def _store(self, value: "Value") -> None:
        self._check_writable()
        container = self._container
        if isinstance(container, JsonObject):
            container[cast("str", self._key)] = value
            return
        if self._pending:
            container.append(value)
            self._key = len(container.values) - 1
            self._pending = False
            return
        index = cast("int", self._key)
        length = len(container.values)
        if index == length:
            container.append(value)
        elif 0 <= index < length:
            container[index] = value
        else:
            raise BoundsError(index, length)

    @property
    def container(self) -> JsonObject | JsonArray:
        """The object or array holding this slot."""
        return self._container

    @property
    def key(self) -> "SlotKey":
        return self._key

    @property
    def read_only(self) -> bool:
        """True if writes through this handle are rejected."""
        return self._read_only or self._fallback is not Undefined

    @property
    def fallback(self) -> "Value":
        """The fallback value, or Undefined if none is configured."""
        return self._fallback

    @property
    def value(self) -> "Value":
        """The stored value, or Undefined if the slot is missing."""
        return self._read()

    @property
    def kind(self) -> Kind:
        return kind_of(self._read())

    @property
    def is_defined(self) -> bool:
        return self._read() is not Undefined

    def __bool__(self) -> bool:
        return self.is_defined

    def has(self, kind: "KindSpec") -> bool:
        """Check whether the slot holds a value of the given kind."""
        return kind_of(self._read()) is resolve_kind(kind)

    # -- Navigation ------------------------------------------------------

    def _child_container(self, kind: Kind) -> JsonObject | JsonArray:
        value = self._read()
        if kind_of(value) is kind:
            return cast("JsonObject | JsonArray", value)
        if value is not Undefined:
            msg = (
                f"field {self._key!r} holds {kind_of(value).value}, "
                f"cannot index it as {kind.value}"
            )
            raise FieldTypeError(msg)
        if kind_of(self._fallback) is kind:
            return cast("JsonObject | JsonArray", self._fallback)
        fresh = cast("JsonObject | JsonArray", default_for(kind))
        if not self.read_only:
            self._store(fresh)
        return fresh

    def __getitem__(self, key: "SlotKey") -> "FieldHandle":
        """Return a handle on a child slot.

        A string key addresses an object property. On a writable handle whose
        slot is missing, an empty object is created first. A missing slot
        with an object fallback navigates into the fallback; otherwise the
        child reads as Undefined. An integer key addresses an existing array
        element, or an element of an array fallback when the slot is missing.

        Raises:
            FieldTypeError: If the slot holds a value of the wrong kind.
            BoundsError: If an array index is out of range.
        """
        if isinstance(key, str):
            obj = self._child_container(Kind.OBJECT)
            return FieldHandle(obj, key, read_only=self.read_only)
        if isinstance(key, bool) or not isinstance(key, int):
            msg = f"keys must be str or int, got {type(key).__name__}"
            raise FieldTypeError(msg)

        value = self._read()
        if value is Undefined and isinstance(self._fallback, JsonArray):
            value = self._fallback
        if value is Undefined:
            raise BoundsError(key, 0)
        if not isinstance(value, JsonArray):
            msg = f"field {self._key!r} holds {kind_of(value).value}, not array"
            raise FieldTypeError(msg)
        if key < 0 or key >= len(value.values):
            raise BoundsError(key, len(value.values))
        return FieldHandle(value, key, read_only=self.read_only)

    def __setitem__(self, key: "SlotKey", value: object) -> None:
        _ = self[key].set(value)

    def __len__(self) -> int:
        value = self._read()
        if value is Undefined:
            return 0
        if isinstance(value, (JsonObject, JsonArray)):
            return len(value)
        msg = f"field {self._key!r} holds {kind_of(value).value}, which has no length"
        raise FieldTypeError(msg)

    def __iter__(self) -> "Iterator[FieldHandle | str]":
        """Iterate element handles of an array, or keys of an object."""
        value = self._read()
        if isinstance(value, JsonArray):
            for index in range(len(value.values)):
                yield FieldHandle(value, index, read_only=self.read_only)
        elif isinstance(value, JsonObject):
            yield from list(value.properties)
        elif value is not Undefined:
            msg = f"field {self._key!r} holds {kind_of(value).value}, not a container"
            raise FieldTypeError(msg)

    # -- Typed reads -----------------------------------------------------

    @overload
    def get_as(self, kind: type[bool]) -> bool: ...  # pragma: no cover

    @overload
    def get_as(self, kind: type[int]) -> int: ...  # pragma: no cover

    @overload
    def get_as(self, kind: type[float]) -> float: ...  # pragma: no cover

    @overload
    def get_as(self, kind: type[str]) -> str: ...  # pragma: no cover

    @overload
    def get_as(self, kind: type[JsonArray]) -> JsonArray: ...  # pragma: no cover

    @overload
    def get_as(self, kind: type[JsonObject]) -> JsonObject: ...  # pragma: no cover

    @overload
    def get_as(self, kind: "KindSpec") -> "Value": ...  # pragma: no cover

    def get_as(self, kind: "KindSpec") -> "Value":
        """Read the slot as a value of the given kind.

        Args:
            kind: A Kind, or one of bool, int, float, str, type(None),
                JsonArray, JsonObject.

        Returns:
            The stored value if it has the requested kind. Containers are
            returned as-is and alias the tree. Otherwise, with a fallback
            configured, the fallback if it has the requested kind. Otherwise,
            for a missing slot on a mutable handle, a fresh default of the
            requested kind, which is stored in the slot.

        Raises:
            FieldTypeError: If no value of the requested kind is available.
        """
        target = resolve_kind(kind)
        if target is Kind.UNDEFINED:
            msg = "cannot read a field as Undefined"
            raise FieldTypeError(msg)

        value = self._read()
        actual = kind_of(value)
        if actual is target:
            return value

        if self._fallback is not Undefined:
            if kind_of(self._fallback) is target:
                return self._fallback
            msg = (
                f"neither field {self._key!r} ({actual.value}) nor its fallback "
                f"({kind_of(self._fallback).value}) is {target.value}"
            )
            raise FieldTypeError(msg)

        if value is Undefined and not self._read_only:
            fresh = default_for(target)
            self._store(fresh)
            return fresh

        msg = f"field {self._key!r} holds {actual.value}, not {target.value}"
        raise FieldTypeError(msg)

    def as_bool(self) -> bool:
        return self.get_as(bool)

    def as_int(self) -> int:
        return self.get_as(int)

    def as_float(self) -> float:
        return self.get_as(float)

    def as_str(self) -> str:
        return self.get_as(str)

    def as_array(self) -> JsonArray:
        return self.get_as(JsonArray)

    def as_object(self) -> JsonObject:
        return self.get_as(JsonObject)

    # -- Fallback and conditionals ---------------------------------------

    def or_(self, default: object) -> "FieldHandle":
        """Return a handle on the same slot that falls back to default.

        The fallback is used by reads when the slot is missing or of the
        wrong kind. The returned handle cannot write.
        """
        return FieldHandle(
            self._container,
            self._key,
            read_only=self._read_only,
            fallback=default,
            pending=self._pending,
        )

    def then(
        self, callback: "Callable[[Value], object]", kind: "KindSpec | None" = None
    ) -> "FieldHandle":
        """Call callback with the slot's value if it is defined.

        When kind is given the value must also be of that kind. If the slot
        does not qualify, the fallback is tried under the same rule.

        Returns:
            This handle, for chaining.
        """
        target = None if kind is None else resolve_kind(kind)
        for candidate in (self._read(), self._fallback):
            if candidate is Undefined:
                continue
            if target is None or kind_of(candidate) is target:
                _ = callback(candidate)
                break
        return self

    def else_(self, callback: "Callable[[], object]") -> "FieldHandle":
        """Call callback if neither the slot nor the fallback holds a value.

        Returns:
            This handle, for chaining.
        """
        if self._read() is Undefined and self._fallback is Undefined:
            _ = callback()
        return self

    # -- Writes ----------------------------------------------------------

    def set(self, value: object) -> "FieldHandle":
        """Replace the slot's value.

        Lists, tuples, and dicts are converted into fresh containers; an
        existing JsonArray or JsonObject is stored by reference. Setting
        Undefined on an object property removes it.

        Raises:
            ReadOnlyFieldError: If the handle is read-only or has a fallback.
            FieldTypeError: If value is not JSON data.
        """
        self._store(to_value(value))
        return self

    def create_object(self) -> JsonObject:
        """Ensure the slot holds an object and return that object.

        Any value of another kind is replaced by an empty object.
        """
        self._check_writable()
        value = self._read()
        if isinstance(value, JsonObject):
            return value
        fresh = JsonObject()
        self._store(fresh)
        return fresh

    def create_array(self) -> JsonArray:
        """Ensure the slot holds an array and return that array.

        Any value of another kind is replaced by an empty array.
        """
        self._check_writable()
        value = self._read()
        if isinstance(value, JsonArray):
            return value
        fresh = JsonArray()
        self._store(fresh)
        return fresh
