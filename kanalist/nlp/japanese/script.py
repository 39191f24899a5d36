"""Japanese script classification and Hiragana/Katakana conversion."""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Set

from kanalist.nlp.base import require_text


class ScriptRange(NamedTuple):
    """Inclusive code-point interval for one Unicode script block."""
    name: str
    start: int
    end: int

    def contains(self, ch: str) -> bool:
        return len(ch) == 1 and self.start <= ord(ch) <= self.end


HIRAGANA = ScriptRange("hiragana", 0x3041, 0x3096)
KATAKANA = ScriptRange("katakana", 0x30A1, 0x30FC)
KANJI = ScriptRange("kanji", 0x4E00, 0x9FAF)

KANA_OFFSET = 0x60

# Katakana letters whose shifted code point is a Hiragana letter (ァ-ヶ).
# "ー" and ヷ-ヺ stay outside it, so to_katakana(to_hiragana(s)) == s for any Katakana s.
_SHIFTABLE_KATAKANA = ScriptRange("katakana", HIRAGANA.start + KANA_OFFSET, HIRAGANA.end + KANA_OFFSET)


def _build_kana_to_katakana() -> Mapping[str, str]:
    table = {chr(cp): chr(cp + KANA_OFFSET) for cp in range(HIRAGANA.start, HIRAGANA.end + 1)}
    return MappingProxyType(table)


_KANA_TO_KATAKANA = _build_kana_to_katakana()


def kana_to_katakana_table() -> Mapping[str, str]:
    """Read-only Hiragana -> Katakana table."""
    return _KANA_TO_KATAKANA


# ──────────────────────────────────────────────────────────────────────────────
# CLASSIFIER
# ──────────────────────────────────────────────────────────────────────────────
def is_hiragana(ch: str) -> bool:
    return HIRAGANA.contains(ch)


def is_katakana(ch: str) -> bool:
    return KATAKANA.contains(ch)


def is_kana(ch: str) -> bool:
    return is_hiragana(ch) or is_katakana(ch)


def is_kanji(ch: str) -> bool:
    return KANJI.contains(ch)


def contains_kanji(text: str) -> bool:
    require_text(text)
    return any(is_kanji(ch) for ch in text)


def is_kana_only(text: str) -> bool:
    """True when *text* is non-empty and every character is Hiragana or Katakana."""
    require_text(text)
    return bool(text) and all(is_kana(ch) for ch in text)


def detect_scripts(text: str) -> Set[str]:
    """Return the names of the scripts present in *text*, ignoring whitespace."""
    require_text(text)
    scripts = set()
    for ch in text:
        if ch.isspace():
            continue
        if is_hiragana(ch):
            scripts.add(HIRAGANA.name)
        elif is_katakana(ch):
            scripts.add(KATAKANA.name)
        elif is_kanji(ch):
            scripts.add(KANJI.name)
        elif ch.isascii() and ch.isalpha():
            scripts.add("latin")
        else:
            scripts.add("other")
    return scripts


# ──────────────────────────────────────────────────────────────────────────────
# CONVERTER
# ──────────────────────────────────────────────────────────────────────────────
class JapaneseScriptConverter:
    """Character-by-character Hiragana <-> Katakana converter."""

    def to_hiragana(self, text: str) -> str:
        """Shift Katakana letters down to Hiragana; everything else passes through."""
        require_text(text)
        return "".join(
            chr(ord(ch) - KANA_OFFSET) if _SHIFTABLE_KATAKANA.contains(ch) else ch
            for ch in text
        )

    def to_katakana(self, text: str) -> str:
        """Map Hiragana letters to Katakana; everything else passes through."""
        require_text(text)
        return "".join(_KANA_TO_KATAKANA.get(ch, ch) for ch in text)


_converter = JapaneseScriptConverter()


def to_hiragana(text: str) -> str:
    return _converter.to_hiragana(text)


def to_katakana(text: str) -> str:
    return _converter.to_katakana(text)
