#!/usr/bin/env python3
import sys
from dotenv import load_dotenv

load_dotenv()

import argparse
from pathlib import Path
from kanalist import DEFAULT_OUTPUT_BATCH_SIZE, DEFAULT_PROCESSING_BATCH_SIZE
from kanalist.columns import MODES
from kanalist.pipeline.base import BatchConfig, PipelineError
from kanalist.pipeline.runner import PipelineRunner
from kanalist.logger import logger

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Add Hiragana, Katakana, romaji, reading-guide, segment and "
                    "transliteration columns to a CSV file."
    )
    parser.add_argument("input", type=Path, help="Input CSV file")
    parser.add_argument("output", type=Path, help="Output CSV file (suffixed with _partN when split)")
    parser.add_argument("--column", required=True, help="Name of the column to process")
    parser.add_argument("--mode", dest="modes", action="append", choices=MODES,
                        help="Columns to generate (repeatable, default: extras)")
    parser.add_argument("--skip-rows", type=int, default=0, help="Number of records to skip")
    parser.add_argument("--output-batch-size", type=int, default=DEFAULT_OUTPUT_BATCH_SIZE,
                        help="Records per output file")
    parser.add_argument("--processing-batch-size", type=int, default=DEFAULT_PROCESSING_BATCH_SIZE,
                        help="Records processed between progress reports")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    modes = args.modes or ["extras"]

    logger.info("🚀 ===== Starting CSV augmentation =====")
    logger.info(f"Input File: {args.input}")
    logger.info(f"Column: {args.column}")
    logger.info(f"Modes: {', '.join(modes)}")
    logger.info(f"Skip Rows: {args.skip_rows:,}")
    logger.info(f"Output Batch Size: {args.output_batch_size:,} records per file")

    try:
        runner = PipelineRunner(BatchConfig(args.output_batch_size, args.processing_batch_size))
        stats = runner.run(args.input, args.output, args.column, modes, args.skip_rows)
    except (PipelineError, ValueError) as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info("📊 ===== Summary =====")
    logger.info(f"📈 Records: {stats['records']}")
    logger.info(f"✅ Augmented: {stats['augmented']}")
    logger.info(f"💾 Files written: {stats['files']}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
