"""Memory profiling benchmarks for fieldjson.

This module contains memory usage benchmarks using pytest-memray to ensure
memory consumption stays within expected bounds.
"""

import sys

import pytest

from fieldjson import parse

from ._generators import create_document, generate_document_text, generate_nested_text

# Skip entire module on Windows (memray not available)
pytestmark = pytest.mark.skipif(
    sys.platform == "win32",
    reason="pytest-memray not available on Windows",
)


class TestMemoryParse:
    """Memory benchmarks for parsing text."""

    @pytest.mark.limit_memory("10 MB")
    def test_parse_1k_small_records(self) -> None:
        text = generate_document_text("small", 1000)
        _ = parse(text)

    @pytest.mark.limit_memory("50 MB")
    @pytest.mark.slow
    def test_parse_10k_small_records(self) -> None:
        text = generate_document_text("small", 10000)
        _ = parse(text)

    @pytest.mark.limit_memory("20 MB")
    def test_parse_1k_medium_records(self) -> None:
        text = generate_document_text("medium", 1000)
        _ = parse(text)

    @pytest.mark.limit_memory("100 MB")
    @pytest.mark.slow
    def test_parse_1k_large_records(self) -> None:
        text = generate_document_text("large", 1000)
        _ = parse(text)

    @pytest.mark.limit_memory("5 MB")
    def test_rejected_deep_input(self) -> None:
        doc = parse(generate_nested_text(100000))
        assert doc.has_error()


class TestMemorySerialize:
    """Memory benchmarks for serializing documents."""

    @pytest.mark.limit_memory("15 MB")
    def test_serialize_1k_small_records(self) -> None:
        doc = create_document("small", 1000)
        _ = doc.serialize()

    @pytest.mark.limit_memory("20 MB")
    def test_serialize_pretty_1k_small_records(self) -> None:
        doc = create_document("small", 1000)
        _ = doc.serialize(pretty=True)


class TestMemoryCopies:
    """Memory benchmarks for copy and clone."""

    @pytest.mark.limit_memory("15 MB")
    def test_copy_1k_small_records(self) -> None:
        doc = create_document("small", 1000)
        _ = doc.copy()

    @pytest.mark.limit_memory("25 MB")
    def test_clone_1k_small_records(self) -> None:
        doc = create_document("small", 1000)
        _ = doc.clone()
