"""Natural Language Processing module for kanalist

This module provides language-specific text processing capabilities including
script conversion, romanization, segmentation and Latin-script transliteration.
"""

from .base import (
    BaseSegmenter,
    BaseRomanizer,
    BaseTransliterator,
    BaseTextProcessor,
    InvalidArgumentError,
)

JAPANESE_CODES = ('ja', 'jp')


def _require_japanese(language: str, purpose: str) -> None:
    if language.lower() not in JAPANESE_CODES:
        raise ValueError(f"Unsupported language for {purpose}: {language}")


def get_segmenter(language: str) -> BaseSegmenter:
    """Get a text segmenter for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific segmenter instance

    Raises:
        ValueError: If language is not supported
    """
    _require_japanese(language, "segmentation")
    from .japanese.segmenter import JapaneseTextSegmenter
    return JapaneseTextSegmenter()


def get_romanizer(language: str) -> BaseRomanizer:
    """Get a romanizer for the specified language.

    Raises:
        ValueError: If language is not supported
    """
    _require_japanese(language, "romanization")
    from .japanese.romanizer import JapaneseRomanizer
    return JapaneseRomanizer()


def get_transliterator(language: str) -> BaseTransliterator:
    """Get a Latin-script transliterator targeting the specified language.

    Raises:
        ValueError: If language is not supported
    """
    _require_japanese(language, "transliteration")
    from .japanese.phonetics import JapaneseTransliterator
    return JapaneseTransliterator()


def get_text_processor(language: str) -> BaseTextProcessor:
    """Get a text processor for the specified language.

    Raises:
        ValueError: If language is not supported
    """
    _require_japanese(language, "text processing")
    from .japanese.text_processor import JapaneseTextProcessor
    return JapaneseTextProcessor()


def get_language_processor(language: str, processor_type: str):
    """Get a language processor instance by type name.

    Args:
        language: Language code ('ja'/'jp' for Japanese)
        processor_type: One of 'segmenter', 'romanizer', 'transliterator'
            or 'text_processor'

    Raises:
        ValueError: If language/processor combination is not supported
    """
    if processor_type == 'segmenter':
        return get_segmenter(language)
    elif processor_type == 'romanizer':
        return get_romanizer(language)
    elif processor_type == 'transliterator':
        return get_transliterator(language)
    elif processor_type == 'text_processor':
        return get_text_processor(language)
    else:
        raise ValueError(f"Unsupported processor type: {processor_type}")


__all__ = [
    'BaseSegmenter',
    'BaseRomanizer',
    'BaseTransliterator',
    'BaseTextProcessor',
    'InvalidArgumentError',
    'get_segmenter',
    'get_romanizer',
    'get_transliterator',
    'get_text_processor',
    'get_language_processor',
]
