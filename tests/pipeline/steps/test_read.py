"""Tests for ReadStep."""
import pytest
from pathlib import Path
from unittest.mock import Mock

from kanalist.pipeline.base import PipelineContext, ColumnNotFoundError
from kanalist.pipeline.steps.read import ReadStep


def make_context(input_path, column="Name", skip_rows=0):
    return PipelineContext(
        input_path=Path(input_path),
        output_path=Path(input_path).with_name("output.csv"),
        column=column,
        modes=["extras"],
        skip_rows=skip_rows,
    )


class TestReadStep:
    """ReadStep loads records and resolves the target column."""

    def test_reads_records(self, sample_csv, sample_rows):
        context = make_context(sample_csv)
        assert ReadStep("read").execute(context) is True
        assert context.fieldnames == ["id", "Name", "City"]
        assert context.records == sample_rows
        assert context.stats["records"] == 4

    def test_column_resolved_case_insensitively(self, sample_csv):
        context = make_context(sample_csv, column="name")
        assert ReadStep("read").execute(context) is True
        assert context.column == "Name"

    def test_skip_rows(self, sample_csv):
        context = make_context(sample_csv, skip_rows=3)
        ReadStep("read").execute(context)
        assert [record["id"] for record in context.records] == ["4"]
        assert context.stats["records"] == 1

    def test_skip_more_rows_than_present(self, sample_csv):
        context = make_context(sample_csv, skip_rows=10)
        assert ReadStep("read").execute(context) is True
        assert context.records == []

    def test_utf8_bom_stripped(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeffName,City\nねこ,Paris\n".encode("utf-8"))
        context = make_context(path)
        assert ReadStep("read").execute(context) is True
        assert context.fieldnames == ["Name", "City"]
        assert context.records == [{"Name": "ねこ", "City": "Paris"}]

    def test_missing_column(self, sample_csv):
        context = make_context(sample_csv, column="Country")
        assert ReadStep("read").execute(context) is False
        assert context.failed_step == "read"

    def test_missing_file(self, tmp_path):
        context = make_context(tmp_path / "missing.csv")
        assert ReadStep("read").execute(context) is False
        assert context.failed_step == "read"

    def test_runs_next_step(self, sample_csv):
        step = ReadStep("read")
        next_step = Mock()
        next_step.execute.return_value = True
        step.set_next(next_step)
        context = make_context(sample_csv)
        assert step.execute(context) is True
        next_step.execute.assert_called_once_with(context)


class TestResolveColumn:
    def test_exact(self):
        assert ReadStep._resolve_column("Name", ["id", "Name"]) == "Name"

    def test_case_insensitive(self):
        assert ReadStep._resolve_column("NAME", ["id", "Name"]) == "Name"

    def test_not_found(self):
        with pytest.raises(ColumnNotFoundError) as exc_info:
            ReadStep._resolve_column("Country", ["id", "Name"])
        assert exc_info.value.column == "Country"
        assert exc_info.value.fieldnames == ["id", "Name"]
        assert "Country" in str(exc_info.value)
