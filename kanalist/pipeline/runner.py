from pathlib import Path
from typing import Dict, Iterable
from kanalist.logger import logger
from kanalist.columns import validate_modes
from kanalist.pipeline.base import PipelineContext, PipelineError, BatchConfig
from kanalist.pipeline.steps.read import ReadStep
from kanalist.pipeline.steps.augment import AugmentStep
from kanalist.pipeline.steps.write import WriteStep

class PipelineRunner:
    """Reads a CSV file, augments one column and writes batched output files"""
    def __init__(self, batch_config: BatchConfig = None):
        self.batch_config = batch_config or BatchConfig()
        self._setup_pipeline()

    def _setup_pipeline(self):
        """Setup the pipeline steps in the correct order"""
        read = ReadStep("read")
        augment = AugmentStep("augment", self.batch_config)
        write = WriteStep("write", self.batch_config)
        read.set_next(augment).set_next(write)
        self.pipeline = read  # Start from the first step!

    def run(
        self,
        input_path: Path,
        output_path: Path,
        column: str,
        modes: Iterable[str] = ("extras",),
        skip_rows: int = 0,
    ) -> Dict[str, int]:
        """Run the pipeline and return statistics.

        Raises:
            ValueError: If *modes* contains an unknown mode or *skip_rows* is negative
            PipelineError: If any step fails
        """
        if skip_rows < 0:
            raise ValueError("skip_rows must not be negative")
        context = PipelineContext(
            input_path=Path(input_path),
            output_path=Path(output_path),
            column=column,
            modes=validate_modes(modes),
            skip_rows=skip_rows,
        )
        logger.info(f"🚀 Running pipeline: {' -> '.join(step.name for step in self.pipeline.steps())}")
        if not self.pipeline.execute(context):
            raise PipelineError(context.failed_step or "unknown", context.input_path)
        return dict(context.stats)
