"""Document: the owner of a root JsonObject and of the last parse error."""

from collections.abc import Iterable, Iterator, Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from ._constants import MAX_NESTING_DEPTH
from ._exceptions import FieldTypeError
from ._handle import FieldHandle
from ._parser import Parser
from ._serializer import serialize
from ._values import JsonObject, to_value

if TYPE_CHECKING:
    from ._builder import Entry
    from ._exceptions import ParseError
    from ._types import JSONObject, KindSpec

__all__ = ["Document", "loads", "parse"]

logger = getLogger(__name__)


class Document:
    """A JSON document rooted at an object.

    Parsing never raises. After parse(), check has_error() before trusting
    the tree: a failed parse leaves the root unset.

    Example:
        doc = Document()
        doc.parse('{"name": "alice", "tags": ["a"]}')
        if not doc.has_error():
            doc["name"].or_("anonymous").then(print)
            doc["tags"].create_array().append("b")
            text = doc.serialize(pretty=True)
    """

    __slots__ = ("_error", "_max_depth", "_root")

    _root: JsonObject | None
    _error: "ParseError | None"
    _max_depth: int

    def __init__(
        self,
        entries: "Iterable[Entry | object] | None" = None,
        *,
        max_depth: int = MAX_NESTING_DEPTH,
    ) -> None:
        """Create a document.

        Args:
            entries: Optional build() items for the root object. Only an
                object-shaped sequence contributes properties.
            max_depth: Maximum object/array nesting accepted by parse().
        """
        if entries is None:
            self._root = JsonObject()
        else:
            self._root = JsonObject.from_entries(entries)
        self._error = None
        self._max_depth = max_depth

    @classmethod
    def from_entries(
        cls, entries: "Iterable[Entry | object]", *, max_depth: int = MAX_NESTING_DEPTH
    ) -> "Document":
        return cls(entries, max_depth=max_depth)

    @classmethod
    def from_python(
        cls, data: "Mapping[str, object]", *, max_depth: int = MAX_NESTING_DEPTH
    ) -> "Document":
        """Create a document from a plain dict of JSON data.

        Raises:
            FieldTypeError: If data is not a mapping of JSON values.
        """
        root = to_value(data)
        if not isinstance(root, JsonObject):
            msg = f"document root must be an object, got {type(data).__name__}"
            raise FieldTypeError(msg)
        document = cls(max_depth=max_depth)
        document._root = root
        return document

    @property
    def root(self) -> JsonObject | None:
        """The root object, or None after a failed parse or reset(False)."""
        return self._root

    @property
    def max_depth(self) -> int:
        return self._max_depth

    # -- Lifecycle -------------------------------------------------------

    def parse(self, text: str) -> None:
        """Replace the root with the object parsed from text.

        Errors are recorded, not raised; see has_error() and get_error().
        """
        parser = Parser(text, max_depth=self._max_depth)
        self._root = parser.parse()
        self._error = parser.error
        if self._error is not None:
            logger.debug(f"Document left without root: {self._error.reason}")

    def reset(self, create_root: bool = True) -> None:  # noqa: FBT001, FBT002
        """Clear the error and the tree.

        Args:
            create_root: If True, the root becomes an empty object (an existing
                root is emptied in place). If False, the root is unset.
        """
        if create_root:
            if self._root is None:
                self._root = JsonObject()
            else:
                self._root.properties.clear()
        else:
            self._root = None
        self._error = None

    def serialize(self, pretty: bool = False) -> str:  # noqa: FBT001, FBT002
        """Render the root object, or return "" if there is no root."""
        if self._root is None:
            return ""
        return serialize(self._root, pretty)

    # -- Errors ----------------------------------------------------------

    @property
    def error(self) -> "ParseError | None":
        """The error recorded by the last parse(), or None."""
        return self._error

    def has_error(self) -> bool:
        return self._error is not None

    def get_error(self) -> str:
        """Return the formatted report of the recorded error, or ""."""
        if self._error is None:
            return ""
        return self._error.report()

    def raise_for_error(self) -> None:
        """Raise the recorded parse error, if any."""
        if self._error is not None:
            raise self._error

    # -- Access ----------------------------------------------------------

    def _ensure_root(self) -> JsonObject:
        if self._root is None:
            self._root = JsonObject()
        return self._root

    def __getitem__(self, key: str) -> FieldHandle:
        """Return a mutable handle on a root property, creating the root if unset."""
        return FieldHandle(self._ensure_root(), key)

    def __setitem__(self, key: str, value: object) -> None:
        self._ensure_root()[key] = value

    def __delitem__(self, key: str) -> None:
        if self._root is None:
            raise KeyError(key)
        del self._root[key]

    def __contains__(self, key: object) -> bool:
        return self._root is not None and key in self._root

    def __len__(self) -> int:
        return 0 if self._root is None else len(self._root)

    def __iter__(self) -> Iterator[str]:
        return iter([] if self._root is None else list(self._root))

    def __repr__(self) -> str:
        return f"Document({self._root!r}, error={self._error!r})"

    def get(self, key: str) -> FieldHandle | None:
        """Return a read-only handle on a root property, or None if absent."""
        if self._root is None:
            return None
        return self._root.get(key)

    def has(self, key: str, kind: "KindSpec | None" = None) -> bool:
        return self._root is not None and self._root.has(key, kind)

    # -- Copies ----------------------------------------------------------

    def copy(self) -> "Document":
        """Return a document with its own root that shares nested containers."""
        document = Document(max_depth=self._max_depth)
        document._root = None if self._root is None else self._root.copy()
        document._error = self._error
        return document

    def clone(self) -> "Document":
        """Return a document that shares no containers with this one."""
        document = Document(max_depth=self._max_depth)
        document._root = None if self._root is None else self._root.clone()
        document._error = self._error
        return document

    def to_python(self) -> "JSONObject | None":
        return None if self._root is None else self._root.to_python()


def parse(text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """Parse text into a new Document.

    The result may carry a recorded error; check has_error().
    """
    document = Document(max_depth=max_depth)
    document.parse(text)
    return document


def loads(text: str, *, max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """Parse text into a new Document, raising the first parse error.

    Raises:
        ParseError: If the text is not a valid document.
    """
    document = parse(text, max_depth=max_depth)
    document.raise_for_error()
    return document
