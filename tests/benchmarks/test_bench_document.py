from typing import TYPE_CHECKING, Literal

import pytest

from fieldjson import Document, parse

from ._generators import (
    build_record,
    create_document,
    generate_document_text,
    generate_nested_text,
)

if TYPE_CHECKING:
    from pytest_codspeed.plugin import BenchmarkFixture


RecordSize = Literal["small", "medium", "large"]

# Scale and size parameters for CI (fast benchmarks)
CI_PARAMS: list[object] = [
    pytest.param("small", 100, id="small-100"),
    pytest.param("small", 1000, id="small-1k"),
    pytest.param("medium", 100, id="med-100"),
]

# Larger scale parameters (marked slow)
SLOW_PARAMS: list[object] = [
    pytest.param("small", 10000, id="small-10k", marks=pytest.mark.slow),
    pytest.param("medium", 1000, id="med-1k", marks=pytest.mark.slow),
    pytest.param("large", 100, id="large-100", marks=pytest.mark.slow),
    pytest.param("large", 1000, id="large-1k", marks=pytest.mark.slow),
]

# Edge case parameters for boundary testing
EDGE_PARAMS: list[object] = [
    pytest.param("small", 0, id="small-0"),
    pytest.param("small", 1, id="small-1"),
]

ALL_PARAMS: list[object] = CI_PARAMS + SLOW_PARAMS
ALL_WITH_EDGE_PARAMS: list[object] = ALL_PARAMS + EDGE_PARAMS


class TestBenchParse:
    @pytest.mark.parametrize(("size", "count"), ALL_WITH_EDGE_PARAMS)
    def test_parse_compact(
        self, benchmark: "BenchmarkFixture", size: RecordSize, count: int
    ) -> None:
        text = generate_document_text(size, count)

        @benchmark
        def parse_compact() -> None:
            doc = parse(text)
            assert not doc.has_error()

    @pytest.mark.parametrize(("size", "count"), ALL_PARAMS)
    def test_parse_pretty(
        self, benchmark: "BenchmarkFixture", size: RecordSize, count: int
    ) -> None:
        text = generate_document_text(size, count, pretty=True)

        @benchmark
        def parse_pretty() -> None:
            doc = parse(text)
            assert not doc.has_error()

    def test_parse_reusing_document(self, benchmark: "BenchmarkFixture") -> None:
        text = generate_document_text("small", 1000)
        doc = Document()

        @benchmark
        def parse_into_existing() -> None:
            doc.parse(text)

    def test_parse_error_near_end(self, benchmark: "BenchmarkFixture") -> None:
        text = generate_document_text("small", 1000)[:-1]

        @benchmark
        def parse_with_error() -> None:
            doc = parse(text)
            assert doc.has_error()
            _ = doc.get_error()

    def test_parse_deep_nesting(self, benchmark: "BenchmarkFixture") -> None:
        text = generate_nested_text(100)

        @benchmark
        def parse_nested() -> None:
            _ = parse(text)


class TestBenchSerialize:
    @pytest.mark.parametrize(("size", "count"), ALL_WITH_EDGE_PARAMS)
    def test_serialize_compact(
        self, benchmark: "BenchmarkFixture", size: RecordSize, count: int
    ) -> None:
        doc = create_document(size, count)

        @benchmark
        def serialize_compact() -> None:
            _ = doc.serialize()

    @pytest.mark.parametrize(("size", "count"), ALL_PARAMS)
    def test_serialize_pretty(
        self, benchmark: "BenchmarkFixture", size: RecordSize, count: int
    ) -> None:
        doc = create_document(size, count)

        @benchmark
        def serialize_pretty() -> None:
            _ = doc.serialize(pretty=True)


class TestBenchAccess:
    @pytest.mark.parametrize(("size", "count"), CI_PARAMS)
    def test_typed_reads(
        self, benchmark: "BenchmarkFixture", size: RecordSize, count: int
    ) -> None:
        doc = create_document(size, count)

        @benchmark
        def read_all() -> None:
            total = 0
            for record in doc["records"].as_array():
                total += record.properties["count"]  # type: ignore[operator,union-attr]
            assert total >= 0

    def test_handle_reads(self, benchmark: "BenchmarkFixture") -> None:
        doc = create_document("small", 1000)
        records = doc.get("records")
        assert records is not None

        @benchmark
        def read_through_handles() -> None:
            for handle in records:
                _ = handle["score"].or_(0.0).as_float()  # type: ignore[index]

    def test_fallback_chain(self, benchmark: "BenchmarkFixture") -> None:
        doc = create_document("small", 100)
        seen: list[object] = []

        @benchmark
        def then_else() -> None:
            for index in range(100):
                _ = doc[f"missing_{index}"].or_(index).then(seen.append).else_(
                    seen.clear
                )

    def test_write_nested(self, benchmark: "BenchmarkFixture") -> None:
        @benchmark
        def write_nested() -> None:
            doc = Document()
            for index in range(1000):
                doc["config"][f"section_{index % 10}"][f"key_{index}"] = index


class TestBenchCopies:
    def test_clone(self, benchmark: "BenchmarkFixture") -> None:
        doc = create_document("medium", 100)

        @benchmark
        def clone() -> None:
            _ = doc.clone()

    def test_copy(self, benchmark: "BenchmarkFixture") -> None:
        doc = create_document("medium", 100)

        @benchmark
        def copy() -> None:
            _ = doc.copy()

    def test_build(self, benchmark: "BenchmarkFixture") -> None:
        @benchmark
        def build_records() -> None:
            for index in range(1000):
                _ = build_record(index)
