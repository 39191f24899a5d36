import csv
from pathlib import Path
from typing import Any, Dict, List
from kanalist.pipeline.base import PipelineStep, PipelineContext, BatchConfig
from kanalist.logger import logger

class WriteStep(PipelineStep):
    def __init__(self, name: str, batch_config: BatchConfig = None):
        super().__init__(name)
        self.batch_config = batch_config or BatchConfig()

    def execute(self, context: PipelineContext) -> bool:
        header = self._build_header(context.fieldnames, context.records)
        size = self.batch_config.output_batch_size
        chunks = [context.records[i:i + size] for i in range(0, len(context.records), size)] or [[]]
        try:
            for index, chunk in enumerate(chunks, start=1):
                path = context.output_path if len(chunks) == 1 else context.part_path(index)
                self._write_csv(path, header, chunk)
                context.written_files.append(path)
                logger.info(f"💾 Wrote {len(chunk)} records to {path}")
        except Exception as e:
            logger.error(f"❌ Write failed: {str(e)}")
            context.failed_step = self.name
            return False

        context.stats["files"] = len(context.written_files)
        return self.run_next(context)

    @staticmethod
    def _build_header(fieldnames: List[str], records: List[Dict[str, Any]]) -> List[str]:
        """Input columns first, then generated columns in first-seen order."""
        header = list(fieldnames)
        for record in records:
            for key in record:
                if key not in header:
                    header.append(key)
        return header

    @staticmethod
    def _write_csv(path: Path, header: List[str], records: List[Dict[str, Any]]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8', newline='') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=header, restval="")
            writer.writeheader()
            writer.writerows(records)
