"""Tests for the analysis orchestrator."""

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from tabprobe.analysis import AnalysisResult, analyze, analyze_file, analyze_table
from tabprobe.core.config import Settings
from tabprobe.core.exceptions import LoadError, UnsupportedSourceError
from tabprobe.core.models import InferredType, LoadedTable, SourceKind


def _csv_with_rows(count: int) -> bytes:
    lines = ["n,label"] + [f"{i},row{i}" for i in range(1, count + 1)]
    return ("\n".join(lines) + "\n").encode()


class TestAnalyze:
    """Tests for analyze on delimited text."""

    def test_result_shape(self, settings: Settings, sample_csv: bytes):
        result = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)

        assert result.row_count == 3
        assert result.column_count == 5
        assert result.column_names == ("id", "name", "score", "active", "joined")
        assert result.data_types == {
            "id": InferredType.NUMBER,
            "name": InferredType.STRING,
            "score": InferredType.NUMBER,
            "active": InferredType.BOOLEAN,
            "joined": InferredType.DATE,
        }

    def test_numeric_stats(self, settings: Settings, sample_csv: bytes):
        result = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)

        assert set(result.numeric_stats) == {"id", "score"}
        id_stats = result.numeric_stats["id"]
        assert (id_stats.count, id_stats.sum, id_stats.mean) == (3, 6, 2)
        assert (id_stats.q1, id_stats.median, id_stats.q3) == (1, 2, 3)

        # "abc" is discarded; sorted subset is [70, 90.5]
        score = result.numeric_stats["score"]
        assert score.count == 2
        assert score.median == 90.5
        assert score.q1 == 70

    def test_invariants(self, settings: Settings, sample_csv: bytes):
        """Names, types and stats agree with each other."""
        result = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)

        assert len(result.column_names) == result.column_count
        assert set(result.data_types) == set(result.column_names)
        assert set(result.numeric_stats) <= set(result.column_names)

    @pytest.mark.parametrize(("count", "expected"), [(1, 1), (5, 5), (12, 5)])
    def test_preview_is_capped(self, settings: Settings, count: int, expected: int):
        result = analyze(_csv_with_rows(count), SourceKind.DELIMITED_TEXT, settings=settings)

        assert result.row_count == count
        assert len(result.preview) == expected
        assert [row["n"] for row in result.preview] == [str(i) for i in range(1, expected + 1)]

    def test_preview_rows_configurable(self, sample_csv: bytes):
        settings = Settings(_env_file=None, preview_rows=2)

        result = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)

        assert len(result.preview) == 2

    def test_preview_rows_verbatim(self, settings: Settings, sample_csv: bytes):
        result = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)

        assert result.preview[1] == {
            "id": "2",
            "name": "Bob",
            "score": "abc",
            "active": "false",
            "joined": "2024-02-01",
        }

    def test_empty_source(self, settings: Settings):
        """Zero data rows gives zero counts and empty collections."""
        result = analyze(b"a,b\n", SourceKind.DELIMITED_TEXT, settings=settings)

        assert result.row_count == 0
        assert result.column_count == 0
        assert result.column_names == ()
        assert result.data_types == {}
        assert result.numeric_stats == {}
        assert result.preview == ()

    def test_idempotent(self, settings: Settings, sample_csv: bytes):
        """Identical input gives an identical result."""
        first = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)
        second = analyze(io.BytesIO(sample_csv), SourceKind.DELIMITED_TEXT, settings=settings)

        assert first == second
        assert first.to_payload() == second.to_payload()

    def test_status_words_are_not_dates(self, settings: Settings):
        result = analyze(b"status,when\nnow,today\n", SourceKind.DELIMITED_TEXT, settings=settings)

        assert result.data_types == {"status": InferredType.STRING, "when": InferredType.STRING}

    def test_load_error_propagates(self, settings: Settings):
        with pytest.raises(LoadError):
            analyze(b"\xff\xfe\x00bad", SourceKind.DELIMITED_TEXT, settings=settings)


class TestAnalyzeSpreadsheet:
    """Tests for analyze on workbooks."""

    def test_first_sheet_summary(self, settings: Settings, make_xlsx: Callable[..., bytes]):
        data = make_xlsx(
            [["item", "qty", "in_stock"], ["bolt", 10, True], ["nut", 30, False], ["gear", 20, True]],
            extra_sheets={"Notes": [["text"], ["ignored"]]},
        )

        result = analyze(data, SourceKind.SPREADSHEET, settings=settings)

        assert result.row_count == 3
        assert result.column_names == ("item", "qty", "in_stock")
        assert result.data_types["qty"] is InferredType.NUMBER
        assert result.data_types["in_stock"] is InferredType.BOOLEAN
        assert result.numeric_stats["qty"].sum == 60
        assert result.numeric_stats["qty"].median == 20
        assert "in_stock" not in result.numeric_stats
        assert "item" not in result.numeric_stats

    def test_blank_first_cell_is_unknown(self, settings: Settings, make_xlsx: Callable[..., bytes]):
        data = make_xlsx([["id", "name"], [None, "a"], [2, "b"]])

        result = analyze(data, SourceKind.SPREADSHEET, settings=settings)

        assert result.data_types["id"] is InferredType.UNKNOWN
        assert result.numeric_stats["id"].count == 1

    def test_corrupt_workbook_raises(self, settings: Settings):
        with pytest.raises(LoadError):
            analyze(b"PK\x03\x04garbage", SourceKind.SPREADSHEET, settings=settings)


class TestAnalyzeTable:
    """Tests for analyze_table."""

    def test_empty_table(self):
        result = analyze_table(LoadedTable.empty(SourceKind.SPREADSHEET))

        assert result.row_count == 0
        assert result.preview == ()

    def test_preview_is_a_copy(self):
        table = LoadedTable(
            rows=({"a": "1"},),
            column_names=("a",),
            source_kind=SourceKind.DELIMITED_TEXT,
        )

        result = analyze_table(table)

        assert result.preview == ({"a": "1"},)
        assert result.preview[0] is not table.rows[0]


class TestAnalyzeFile:
    """Tests for analyze_file."""

    def test_kind_from_extension(self, tmp_path: Path, settings: Settings, sample_csv: bytes):
        path = tmp_path / "people.csv"
        path.write_bytes(sample_csv)

        result = analyze_file(path, settings=settings)

        assert result.row_count == 3

    def test_explicit_kind_overrides_extension(
        self, tmp_path: Path, settings: Settings, sample_csv: bytes
    ):
        path = tmp_path / "people.txt"
        path.write_bytes(sample_csv)

        result = analyze_file(path, SourceKind.DELIMITED_TEXT, settings=settings)

        assert result.column_count == 5

    def test_unsupported_extension(self, tmp_path: Path, settings: Settings):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(UnsupportedSourceError):
            analyze_file(path, settings=settings)

    def test_missing_file(self, tmp_path: Path, settings: Settings):
        with pytest.raises(LoadError, match="Cannot open"):
            analyze_file(tmp_path / "missing.csv", settings=settings)


class TestAnalysisResultPayload:
    """Tests for the wire shape."""

    def test_aliases(self, settings: Settings, sample_csv: bytes):
        payload = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings).to_payload()

        assert set(payload) == {
            "rows",
            "columns",
            "columnNames",
            "dataTypes",
            "numericStats",
            "preview",
        }
        assert payload["dataTypes"]["active"] == "boolean"
        assert payload["numericStats"]["id"] == {
            "count": 3,
            "mean": 2.0,
            "min": 1.0,
            "max": 3.0,
            "sum": 6.0,
            "median": 2.0,
            "q1": 1.0,
            "q3": 3.0,
        }
        assert isinstance(payload["preview"], list)

    def test_result_is_frozen(self, settings: Settings, sample_csv: bytes):
        result = analyze(sample_csv, SourceKind.DELIMITED_TEXT, settings=settings)

        with pytest.raises(Exception):
            result.row_count = 0  # type: ignore[misc]

    def test_construct_by_alias(self):
        result = AnalysisResult.model_validate({"rows": 0, "columns": 0})

        assert result.row_count == 0
        assert result.numeric_stats == {}
