"""Aggregate Japanese text processing (scripts, romaji, segments, reading guide)."""

from kanalist.nlp.base import BaseTextProcessor, require_text
from kanalist.schema import ProcessedText
from .romanizer import JapaneseRomanizer
from .script import JapaneseScriptConverter
from .segmenter import JapaneseTextSegmenter


class JapaneseTextProcessor(BaseTextProcessor):
    """Builds every derived representation of one Japanese text value."""

    def __init__(self):
        self.converter = JapaneseScriptConverter()
        self.romanizer = JapaneseRomanizer()
        self.segmenter = JapaneseTextSegmenter()

    def create_reading_guide(self, text: str) -> str:
        """Return ``"{text} ({romaji})"``."""
        return f"{require_text(text)} ({self.romanizer.to_romaji(text)})"

    def process_text(self, text: str) -> ProcessedText:
        """
        Convert *text* into every supported representation.

        Args:
            text: Source text, usually a machine translation into Japanese

        Returns:
            Frozen ProcessedText with the Hiragana, Katakana, romaji,
            segment and reading-guide forms of *text*
        """
        require_text(text)
        return ProcessedText(
            original=text,
            hiragana=self.converter.to_hiragana(text),
            katakana=self.converter.to_katakana(text),
            romaji=self.romanizer.to_romaji(text),
            segments=tuple(self.segmenter.segment_text(text)),
            reading_guide=self.create_reading_guide(text),
        )


_processor = JapaneseTextProcessor()


def create_reading_guide(text: str) -> str:
    return _processor.create_reading_guide(text)


def process_text(text: str) -> ProcessedText:
    return _processor.process_text(text)
