"""Japanese kana romanization (Hepburn-style)."""

import re
from types import MappingProxyType
from typing import List, Mapping, Optional

from kanalist.nlp.base import BaseRomanizer, require_text
from .script import to_katakana

SOKUON = ("っ", "ッ")
CHOONPU = "ー"

_HIRAGANA_ROMAJI = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo", "ん": "n",
    # dakuten
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ゔ": "vu",
    # handakuten
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    # small kana
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa", "ゕ": "ka", "ゖ": "ke",
    # contracted sounds
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho", "しぇ": "she",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho", "ちぇ": "che",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo", "じぇ": "je",
    "ぢゃ": "ja", "ぢゅ": "ju", "ぢょ": "jo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    # loanword combinations, mostly written in Katakana
    "てぃ": "ti", "でぃ": "di", "とぅ": "tu", "どぅ": "du",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo",
    "うぃ": "wi", "うぇ": "we", "うぉ": "wo",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
    "つぁ": "tsa", "つぃ": "tsi", "つぇ": "tse", "つぉ": "tso",
    "いぇ": "ye",
}


def _build_romaji_table() -> Mapping[str, str]:
    table = dict(_HIRAGANA_ROMAJI)
    for kana, romaji in _HIRAGANA_ROMAJI.items():
        table.setdefault(to_katakana(kana), romaji)
    for key in table:
        if not 1 <= len(key) <= 2:
            raise ValueError(f"Romaji table key must be one or two kana: {key!r}")
    return MappingProxyType(table)


_ROMAJI_TABLE = _build_romaji_table()
_TRAILING_VOWEL_RE = re.compile(r"[aeiou]$")


def romaji_table() -> Mapping[str, str]:
    """Read-only kana -> romaji table (Hiragana and Katakana keys)."""
    return _ROMAJI_TABLE


class JapaneseRomanizer(BaseRomanizer):
    """Kana to romaji converter with digraph priority.

    Args:
        hepburn: Also apply the Hepburn sokuon and long-vowel conventions.
            Off by default, so every kana missing from the table (including
            "っ" and "ー") is kept verbatim.
    """

    def __init__(self, hepburn: bool = False):
        self.hepburn = hepburn

    @staticmethod
    def _match(text: str, i: int) -> Optional[tuple]:
        """Return (romaji, length) for the longest table key at *i*, or None."""
        pair = text[i:i + 2]
        if len(pair) == 2 and pair in _ROMAJI_TABLE:
            return _ROMAJI_TABLE[pair], 2
        single = text[i]
        if single in _ROMAJI_TABLE:
            return _ROMAJI_TABLE[single], 1
        return None

    def to_romaji(self, text: str) -> str:
        """Convert the kana in *text* to romaji.

        The cursor only moves forward.  Two-character digraphs ("きょ") are
        tried before single kana; anything not in the table is copied as is.
        With ``hepburn`` set, a sokuon doubles the next consonant
        ("きって" -> "kitte") and the long-vowel mark repeats the previous
        vowel ("ラーメン" -> "raamen").
        """
        require_text(text)
        romaji: List[str] = []
        i = 0
        while i < len(text):
            ch = text[i]

            if self.hepburn and ch in SOKUON:
                following = self._match(text, i + 1) if i + 1 < len(text) else None
                if following and following[0][:1] not in "aeioun":
                    romaji.append("t" if following[0].startswith("ch") else following[0][0])
                else:
                    romaji.append(ch)
                i += 1
                continue

            if self.hepburn and ch == CHOONPU:
                # Prolong the previous vowel; bare hyphen if there is none.
                prev = romaji[-1] if romaji else ""
                match = _TRAILING_VOWEL_RE.search(prev)
                romaji.append(match.group(0) if match else "-")
                i += 1
                continue

            found = self._match(text, i)
            if found:
                romaji.append(found[0])
                i += found[1]
            else:
                romaji.append(ch)
                i += 1

        return "".join(romaji)


_romanizer = JapaneseRomanizer()


def to_romaji(text: str) -> str:
    return _romanizer.to_romaji(text)
