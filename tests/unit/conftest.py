"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from fieldjson import Document

if TYPE_CHECKING:
    from collections.abc import Callable


SAMPLE_TEXT = """
{
    "name": "alice",
    "age": 30,
    "score": 9.5,
    "active": true,
    "manager": null,
    "tags": ["admin", "ops"],
    "address": {"city": "Oslo", "zip": "0150"}
}
"""


@pytest.fixture
def make_document() -> "Callable[..., Document]":
    """Factory fixture for parsed Document instances.

    Returns a callable that parses the given text (the sample document by
    default) and asserts that no error was recorded.

    Example:
        def test_reads_name(make_document) -> None:
            doc = make_document('{"name": "alice"}')
            assert doc["name"].as_str() == "alice"
    """

    def create_document(
        text: str = SAMPLE_TEXT, *, max_depth: int | None = None
    ) -> Document:
        doc = Document() if max_depth is None else Document(max_depth=max_depth)
        doc.parse(text)
        assert not doc.has_error(), doc.get_error()
        return doc

    return create_document


@pytest.fixture
def sample_document(make_document: "Callable[..., Document]") -> Document:
    """Provide the parsed sample document."""
    return make_document()
