"""Japanese language processing module."""

from .script import (
    JapaneseScriptConverter,
    ScriptRange,
    contains_kanji,
    detect_scripts,
    is_hiragana,
    is_kana_only,
    is_kanji,
    is_katakana,
    to_hiragana,
    to_katakana,
)
from .romanizer import JapaneseRomanizer, to_romaji
from .segmenter import JapaneseTextSegmenter, segment_text
from .phonetics import JapaneseTransliterator, transliterate
from .text_processor import JapaneseTextProcessor, create_reading_guide, process_text

__all__ = [
    'JapaneseScriptConverter',
    'JapaneseRomanizer',
    'JapaneseTextSegmenter',
    'JapaneseTransliterator',
    'JapaneseTextProcessor',
    'ScriptRange',
    'contains_kanji',
    'detect_scripts',
    'is_hiragana',
    'is_kana_only',
    'is_kanji',
    'is_katakana',
    'to_hiragana',
    'to_katakana',
    'to_romaji',
    'segment_text',
    'transliterate',
    'create_reading_guide',
    'process_text',
]
