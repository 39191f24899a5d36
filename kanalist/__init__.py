import os

# Suffixes appended to the source column name for each generated field
HIRAGANA_SUFFIX = "_Hiragana"
KATAKANA_SUFFIX = "_Katakana"
ROMAJI_SUFFIX = "_Romaji"
READING_GUIDE_SUFFIX = "_ReadingGuide"
SEGMENTS_SUFFIX = "_Segments"
TRANSLITERATED_SUFFIX = "_Transliterated"

# Separators
SEGMENTS_SEPARATOR = " | "
WORD_SEPARATOR = "・"

# Batch sizes for the CSV pipeline
DEFAULT_OUTPUT_BATCH_SIZE = int(os.getenv("KANALIST_OUTPUT_BATCH_SIZE", "1000"))
DEFAULT_PROCESSING_BATCH_SIZE = int(os.getenv("KANALIST_PROCESSING_BATCH_SIZE", "50"))
