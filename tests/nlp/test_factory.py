"""Tests for the language processor factories."""
import pytest
from kanalist.nlp import (
    get_segmenter,
    get_romanizer,
    get_transliterator,
    get_text_processor,
    get_language_processor,
)
from kanalist.nlp.japanese import (
    JapaneseTextSegmenter,
    JapaneseRomanizer,
    JapaneseTransliterator,
    JapaneseTextProcessor,
)


class TestFactories:
    """Test factory functions return the Japanese implementations."""

    @pytest.mark.parametrize("language", ["ja", "jp", "JA"])
    def test_japanese_codes(self, language):
        assert isinstance(get_segmenter(language), JapaneseTextSegmenter)
        assert isinstance(get_romanizer(language), JapaneseRomanizer)
        assert isinstance(get_transliterator(language), JapaneseTransliterator)
        assert isinstance(get_text_processor(language), JapaneseTextProcessor)

    def test_unsupported_language(self):
        with pytest.raises(ValueError, match="Unsupported language for segmentation: de"):
            get_segmenter("de")
        with pytest.raises(ValueError, match="Unsupported language for transliteration: es"):
            get_transliterator("es")

    def test_get_language_processor(self):
        assert isinstance(get_language_processor("ja", "segmenter"), JapaneseTextSegmenter)
        assert isinstance(get_language_processor("ja", "romanizer"), JapaneseRomanizer)
        assert isinstance(get_language_processor("ja", "transliterator"), JapaneseTransliterator)
        assert isinstance(get_language_processor("ja", "text_processor"), JapaneseTextProcessor)

    def test_get_language_processor_unknown_type(self):
        with pytest.raises(ValueError, match="Unsupported processor type: tokenizer"):
            get_language_processor("ja", "tokenizer")
