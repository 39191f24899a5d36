"""Write engine results into suffixed columns of a tabular record."""

from typing import Any, Dict, Iterable, Optional

from kanalist import (
    HIRAGANA_SUFFIX,
    KATAKANA_SUFFIX,
    READING_GUIDE_SUFFIX,
    ROMAJI_SUFFIX,
    SEGMENTS_SEPARATOR,
    SEGMENTS_SUFFIX,
    TRANSLITERATED_SUFFIX,
)
from kanalist.nlp import get_text_processor, get_transliterator

MODES = ("hiragana", "katakana", "extras", "transliterate")


def validate_modes(modes: Iterable[str]) -> list:
    modes = list(modes)
    unknown = [mode for mode in modes if mode not in MODES]
    if unknown:
        raise ValueError(f"Unsupported augmentation mode(s): {', '.join(unknown)}")
    return modes


def augment_row(
    row: Dict[str, Any],
    column: str,
    modes: Iterable[str],
    processor=None,
    transliterator=None,
) -> Dict[str, Any]:
    """Return a copy of *row* with generated columns for *column*.

    Rows whose value is missing or empty are returned unchanged (as a copy).
    """
    modes = validate_modes(modes)
    augmented = dict(row)
    value: Optional[str] = row.get(column)
    if not value:
        return augmented

    processor = processor or get_text_processor('ja')
    if "hiragana" in modes or "katakana" in modes or "extras" in modes:
        processed = processor.process_text(value)
        if "hiragana" in modes:
            augmented[f"{column}{HIRAGANA_SUFFIX}"] = processed.hiragana
        if "katakana" in modes:
            augmented[f"{column}{KATAKANA_SUFFIX}"] = processed.katakana
        if "extras" in modes:
            augmented[f"{column}{ROMAJI_SUFFIX}"] = processed.romaji
            augmented[f"{column}{READING_GUIDE_SUFFIX}"] = processed.reading_guide
            augmented[f"{column}{SEGMENTS_SUFFIX}"] = SEGMENTS_SEPARATOR.join(processed.segments)

    if "transliterate" in modes:
        transliterator = transliterator or get_transliterator('ja')
        augmented[f"{column}{TRANSLITERATED_SUFFIX}"] = transliterator.transliterate(value)

    return augmented
