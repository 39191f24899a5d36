from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List
from abc import ABC, abstractmethod

from kanalist import DEFAULT_OUTPUT_BATCH_SIZE, DEFAULT_PROCESSING_BATCH_SIZE


class PipelineError(Exception):
    """Raised by the runner when a pipeline step fails."""
    def __init__(self, step: str, input_path: Path):
        super().__init__(f"Pipeline step '{step}' failed for {input_path}")
        self.step = step
        self.input_path = input_path


class ColumnNotFoundError(ValueError):
    """Raised when the requested column is not in the CSV header."""
    def __init__(self, column: str, fieldnames: List[str]):
        super().__init__(f"Column '{column}' not found in CSV file (columns: {', '.join(fieldnames)})")
        self.column = column
        self.fieldnames = fieldnames


class BatchConfig:
    def __init__(
        self,
        output_batch_size: int = DEFAULT_OUTPUT_BATCH_SIZE,
        processing_batch_size: int = DEFAULT_PROCESSING_BATCH_SIZE,
    ):
        if output_batch_size <= 0 or processing_batch_size <= 0:
            raise ValueError("Batch sizes must be positive")
        self.output_batch_size = output_batch_size
        self.processing_batch_size = processing_batch_size


@dataclass
class PipelineContext:
    """Context object passed between pipeline steps"""
    input_path: Path
    output_path: Path
    column: str
    modes: List[str]
    skip_rows: int = 0
    fieldnames: List[str] = field(default_factory=list)
    records: List[Dict[str, Any]] = field(default_factory=list)
    written_files: List[Path] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=lambda: {"records": 0, "augmented": 0, "files": 0})
    failed_step: Optional[str] = None

    def part_path(self, index: int) -> Path:
        """Output path for the *index*-th (1-based) output file of a multi-file run."""
        return self.output_path.with_name(f"{self.output_path.stem}_part{index}{self.output_path.suffix}")


class PipelineStep(ABC):
    """Base class for all pipeline steps"""
    def __init__(self, name: str):
        self.name = name
        self._next_step: Optional[PipelineStep] = None

    @abstractmethod
    def execute(self, context: 'PipelineContext') -> bool:
        pass

    def set_next(self, step: 'PipelineStep') -> 'PipelineStep':
        self._next_step = step
        return step

    def run_next(self, context: 'PipelineContext') -> bool:
        if self._next_step:
            return self._next_step.execute(context)
        return True

    def steps(self) -> List['PipelineStep']:
        chain, step = [], self
        while step:
            chain.append(step)
            step = step._next_step
        return chain
