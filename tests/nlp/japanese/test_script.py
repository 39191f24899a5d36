"""Tests for Japanese script classification and conversion."""
import pytest
from kanalist.nlp.japanese.script import (
    HIRAGANA,
    KATAKANA,
    JapaneseScriptConverter,
    contains_kanji,
    detect_scripts,
    is_hiragana,
    is_kana_only,
    is_kanji,
    is_katakana,
    kana_to_katakana_table,
    to_hiragana,
    to_katakana,
)


class TestClassifier:
    """Test single-character script classification."""

    def test_hiragana_range(self):
        assert is_hiragana("ぁ")  # U+3041
        assert is_hiragana("ゖ")  # U+3096
        assert is_hiragana("あ")
        assert not is_hiragana("ア")
        assert not is_hiragana("゙")  # U+3099 combining dakuten

    def test_katakana_range(self):
        assert is_katakana("ァ")  # U+30A1
        assert is_katakana("ー")  # U+30FC
        assert is_katakana("ア")
        assert not is_katakana("ヿ")  # U+30FF
        assert not is_katakana("あ")

    def test_multi_character_strings_are_not_a_character(self):
        assert not is_hiragana("あい")
        assert not is_katakana("")

    def test_kanji(self):
        assert is_kanji("東")
        assert not is_kanji("ひ")
        assert contains_kanji("東京タワー")
        assert not contains_kanji("とうきょう")

    def test_is_kana_only(self):
        assert is_kana_only("ひらがなカタカナー")
        assert not is_kana_only("")
        assert not is_kana_only("かな漢字")
        assert not is_kana_only("かな abc")

    def test_detect_scripts(self):
        assert detect_scripts("東京 tower タワー！") == {"kanji", "latin", "katakana", "other"}
        assert detect_scripts("ひらがな") == {"hiragana"}
        assert detect_scripts(" 　") == set()

    def test_script_range_contains(self):
        assert HIRAGANA.contains("あ")
        assert not HIRAGANA.contains("ア")
        assert KATAKANA.start == 0x30A1
        assert KATAKANA.end == 0x30FC


class TestConverter:
    """Test Hiragana <-> Katakana conversion."""

    def test_to_hiragana(self):
        assert to_hiragana("カタカナ") == "かたかな"

    def test_to_katakana(self):
        assert to_katakana("ひらがな") == "ヒラガナ"

    def test_non_kana_pass_through(self):
        assert to_hiragana("abc 漢字 123") == "abc 漢字 123"
        assert to_katakana("abc 漢字 123") == "abc 漢字 123"

    def test_long_vowel_mark_is_kept(self):
        assert to_hiragana("ラーメン") == "らーめん"

    def test_small_kana_and_vu(self):
        assert to_hiragana("ヴァ") == "ゔぁ"
        assert to_katakana("ゕゖ") == "ヵヶ"

    def test_empty(self):
        assert to_hiragana("") == ""
        assert to_katakana("") == ""

    @pytest.mark.parametrize("text", [
        "カタカナ",
        "ラーメン",
        "ヴァイオリン",
        "ヷヸヹヺ",
        "コーヒー・ブレイク",
        "ABC カナ 123",
        "ヵヶ",
        "東京タワー",
    ])
    def test_katakana_round_trip(self, text):
        assert to_katakana(to_hiragana(text)) == text

    def test_mixed_text_converts_only_kana(self):
        assert to_katakana("東京はきれい") == "東京ハキレイ"
        assert to_hiragana("東京ハキレイ") == "東京はきれい"

    def test_converter_instance(self):
        converter = JapaneseScriptConverter()
        assert converter.to_katakana("あ") == "ア"
        assert converter.to_hiragana("ア") == "あ"


class TestKanaTable:
    """Test the shared Hiragana -> Katakana table."""

    def test_offset(self):
        table = kana_to_katakana_table()
        assert len(table) == 0x3096 - 0x3041 + 1
        assert all(ord(k) + 0x60 == ord(v) for k, v in table.items())

    def test_read_only(self):
        table = kana_to_katakana_table()
        with pytest.raises(TypeError):
            table["あ"] = "X"
