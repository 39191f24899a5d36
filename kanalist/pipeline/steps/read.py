import csv
from typing import List
from kanalist.pipeline.base import PipelineStep, PipelineContext, ColumnNotFoundError
from kanalist.logger import logger

class ReadStep(PipelineStep):
    def execute(self, context: PipelineContext) -> bool:
        logger.info(f"📥 Reading {context.input_path}")
        try:
            # utf-8-sig drops the BOM spreadsheet exports tend to add
            with open(context.input_path, 'r', encoding='utf-8-sig', newline='') as csvfile:
                reader = csv.DictReader(csvfile)
                fieldnames = list(reader.fieldnames or [])
                context.column = self._resolve_column(context.column, fieldnames)
                records = list(reader)
        except Exception as e:
            logger.error(f"❌ Read failed: {str(e)}")
            context.failed_step = self.name
            return False

        if context.skip_rows:
            logger.info(f"⏭️ Skipping the first {context.skip_rows} records")
        context.fieldnames = fieldnames
        context.records = records[context.skip_rows:]
        context.stats["records"] = len(context.records)
        logger.info(f"📋 Read {len(records)} records, {len(context.records)} to process")
        return self.run_next(context)

    @staticmethod
    def _resolve_column(column: str, fieldnames: List[str]) -> str:
        """Match *column* against the header case-insensitively, returning the header's spelling."""
        for name in fieldnames:
            if name.lower() == column.lower():
                return name
        raise ColumnNotFoundError(column, fieldnames)
