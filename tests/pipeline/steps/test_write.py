"""Tests for WriteStep."""
import pytest
from pathlib import Path

from kanalist.pipeline.base import BatchConfig, PipelineContext
from kanalist.pipeline.steps.write import WriteStep


@pytest.fixture
def context(tmp_path):
    context = PipelineContext(
        input_path=tmp_path / "input.csv",
        output_path=tmp_path / "out" / "result.csv",
        column="Name",
        modes=["extras"],
    )
    context.fieldnames = ["id", "Name"]
    context.records = [
        {"id": "1", "Name": "ねこ", "Name_Romaji": "neko"},
        {"id": "2", "Name": ""},
        {"id": "3", "Name": "いぬ", "Name_Romaji": "inu"},
    ]
    return context


class TestWriteStep:
    """WriteStep writes one file, or numbered parts when batching."""

    def test_single_file(self, context, csv_reader):
        assert WriteStep("write").execute(context) is True
        assert context.written_files == [context.output_path]
        assert context.stats["files"] == 1
        fieldnames, rows = csv_reader(context.output_path)
        assert fieldnames == ["id", "Name", "Name_Romaji"]
        assert rows[1] == {"id": "2", "Name": "", "Name_Romaji": ""}
        assert rows[2]["Name_Romaji"] == "inu"

    def test_split_into_parts(self, context, csv_reader):
        step = WriteStep("write", BatchConfig(output_batch_size=2))
        assert step.execute(context) is True
        out_dir = context.output_path.parent
        assert context.written_files == [out_dir / "result_part1.csv", out_dir / "result_part2.csv"]
        assert context.stats["files"] == 2
        _, first = csv_reader(out_dir / "result_part1.csv")
        fieldnames, second = csv_reader(out_dir / "result_part2.csv")
        assert [row["id"] for row in first] == ["1", "2"]
        assert [row["id"] for row in second] == ["3"]
        assert fieldnames == ["id", "Name", "Name_Romaji"]
        assert not context.output_path.exists()

    def test_no_records_writes_header(self, context, csv_reader):
        context.records = []
        assert WriteStep("write").execute(context) is True
        fieldnames, rows = csv_reader(context.output_path)
        assert fieldnames == ["id", "Name"]
        assert rows == []

    def test_failure_marks_step(self, context, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        context.output_path = blocker / "result.csv"
        assert WriteStep("write").execute(context) is False
        assert context.failed_step == "write"


class TestBuildHeader:
    def test_generated_columns_in_first_seen_order(self):
        records = [{"a": 1, "a_X": 2}, {"a": 3, "a_Y": 4, "a_X": 5}]
        assert WriteStep._build_header(["a"], records) == ["a", "a_X", "a_Y"]


class TestPartPath:
    def test_part_path(self):
        context = PipelineContext(
            input_path=Path("in.csv"),
            output_path=Path("data/names.csv"),
            column="Name",
            modes=[],
        )
        assert context.part_path(3) == Path("data/names_part3.csv")
