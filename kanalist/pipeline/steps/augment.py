from kanalist.pipeline.base import PipelineStep, PipelineContext, BatchConfig
from kanalist.logger import logger
from kanalist.columns import augment_row
from kanalist.nlp import get_text_processor, get_transliterator

class AugmentStep(PipelineStep):
    def __init__(self, name: str, batch_config: BatchConfig = None):
        super().__init__(name)
        self.batch_config = batch_config or BatchConfig()
        self.processor = get_text_processor('ja')
        self.transliterator = get_transliterator('ja')

    def execute(self, context: PipelineContext) -> bool:
        """Augment every record in processing batches."""
        logger.info(f"🈁 Augmenting column '{context.column}' with modes: {', '.join(context.modes)}")
        total = len(context.records)
        batch_size = self.batch_config.processing_batch_size
        try:
            for start in range(0, total, batch_size):
                batch = context.records[start:start + batch_size]
                for offset, record in enumerate(batch):
                    augmented = augment_row(
                        record,
                        context.column,
                        context.modes,
                        processor=self.processor,
                        transliterator=self.transliterator,
                    )
                    if augmented != record:
                        context.stats["augmented"] += 1
                    context.records[start + offset] = augmented
                logger.info(f"📊 Processed {min(start + batch_size, total)}/{total} records")
        except Exception as e:
            logger.error(f"❌ Augmentation failed: {str(e)}")
            logger.exception(e)
            context.failed_step = self.name
            return False

        logger.info(f"✅ Augmented {context.stats['augmented']} of {total} records")
        return self.run_next(context)
