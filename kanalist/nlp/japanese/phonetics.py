"""Latin to Katakana phonetic approximation.

English words (mostly proper nouns: names, places) are approximated as
Katakana with a static dictionary and a greedy longest-match scanner.  The
dictionary is generated once at import from a consonant/vowel syllable grid
plus hand-written entries for whole words, endings and spelling patterns.
"""

import unicodedata
from types import MappingProxyType
from typing import Dict, List, Mapping

import jaconv

from kanalist import WORD_SEPARATOR
from kanalist.logger import logger
from kanalist.nlp.base import BaseTransliterator, require_text

MAX_KEY_LENGTH = 8

CONSONANTS = "bcdfghjklmnpqrstvwxyz"

# Column order of the syllable grid rows below
_GRID_VOWELS = "aiueo"

# ──────────────────────────────────────────────────────────────────────────────
# SYLLABLE GRID (onset -> kana for a, i, u, e, o)
# ──────────────────────────────────────────────────────────────────────────────
_SYLLABLES = {
    "":   ("ア", "イ", "ウ", "エ", "オ"),
    "k":  ("カ", "キ", "ク", "ケ", "コ"),
    "g":  ("ガ", "ギ", "グ", "ゲ", "ゴ"),
    "s":  ("サ", "シ", "ス", "セ", "ソ"),
    "z":  ("ザ", "ジ", "ズ", "ゼ", "ゾ"),
    "t":  ("タ", "ティ", "ト", "テ", "ト"),
    "d":  ("ダ", "ディ", "ド", "デ", "ド"),
    "n":  ("ナ", "ニ", "ヌ", "ネ", "ノ"),
    "h":  ("ハ", "ヒ", "フ", "ヘ", "ホ"),
    "b":  ("バ", "ビ", "ブ", "ベ", "ボ"),
    "p":  ("パ", "ピ", "プ", "ペ", "ポ"),
    "m":  ("マ", "ミ", "ム", "メ", "モ"),
    "y":  ("ヤ", "イ", "ユ", "イェ", "ヨ"),
    "r":  ("ラ", "リ", "ル", "レ", "ロ"),
    "l":  ("ラ", "リ", "ル", "レ", "ロ"),
    "w":  ("ワ", "ウィ", "ウ", "ウェ", "ウォ"),
    "f":  ("ファ", "フィ", "フ", "フェ", "フォ"),
    "v":  ("ヴァ", "ヴィ", "ヴ", "ヴェ", "ヴォ"),
    "j":  ("ジャ", "ジ", "ジュ", "ジェ", "ジョ"),
    "c":  ("カ", "シ", "ク", "セ", "コ"),
    "q":  ("クァ", "クィ", "ク", "クェ", "クォ"),
    "x":  ("クサ", "クシ", "クス", "クセ", "クソ"),
    "sh": ("シャ", "シ", "シュ", "シェ", "ショ"),
    "ch": ("チャ", "チ", "チュ", "チェ", "チョ"),
    "th": ("サ", "シ", "ス", "セ", "ソ"),
    "ph": ("ファ", "フィ", "フ", "フェ", "フォ"),
    "wh": ("ワ", "ウィ", "ウ", "ウェ", "ウォ"),
    "ts": ("ツァ", "ツィ", "ツ", "ツェ", "ツォ"),
}

# Contracted sounds (onset + y + a/u/o)
_YOON = {
    "ky": ("キャ", "キュ", "キョ"),
    "gy": ("ギャ", "ギュ", "ギョ"),
    "ny": ("ニャ", "ニュ", "ニョ"),
    "hy": ("ヒャ", "ヒュ", "ヒョ"),
    "my": ("ミャ", "ミュ", "ミョ"),
    "ry": ("リャ", "リュ", "リョ"),
    "by": ("ビャ", "ビュ", "ビョ"),
    "py": ("ピャ", "ピュ", "ピョ"),
}

# Lone two-letter onsets (no vowel follows)
_LONE_ONSETS = {"sh": "シュ", "ch": "チ", "th": "ス", "ph": "フ", "ts": "ツ", "ck": "ック"}

# Vowel digraphs: spelling -> (grid column, suffix)
_VOWEL_DIGRAPHS = {
    "ee": (1, "ー"), "ea": (1, "ー"),
    "oo": (2, "ー"),
    "ai": (3, "ー"), "ay": (3, "ー"), "ey": (3, "ー"),
    "oa": (4, "ー"), "ow": (4, "ー"), "au": (4, "ー"), "aw": (4, "ー"),
}

# Doubled consonants written with a small tsu, with ン, or as a single sound
_SOKUON_GEMINATES = "kgsztdbpfc"
_NASAL_GEMINATES = "mn"
_PLAIN_GEMINATES = "lr"

# Onsets whose "-ew" reads as a contracted yu ("new" -> ニュー)
_EW_ONSETS = "kgnhbpmrl"

# Whole words, common name/place endings and English spelling patterns
_WORDS = {
    # common English word endings
    "worth": "ワース", "ville": "ビル", "field": "フィールド", "bridge": "ブリッジ",
    "burgh": "バラ", "water": "ウォーター", "berry": "ベリー", "shire": "シャー",
    "stone": "ストーン", "leigh": "リー", "port": "ポート", "side": "サイド",
    "wood": "ウッド", "land": "ランド", "gate": "ゲート", "ford": "フォード",
    "view": "ビュー", "hill": "ヒル", "son": "ソン", "ton": "トン",
    # whole words
    "hotel": "ホテル", "london": "ロンドン", "new": "ニュー", "york": "ヨーク",
    "park": "パーク", "lake": "レイク", "river": "リバー", "city": "シティ",
    "center": "センター", "centre": "センター", "garden": "ガーデン",
    "station": "ステーション", "tower": "タワー", "castle": "キャッスル",
    "church": "チャーチ", "school": "スクール", "house": "ハウス",
    "north": "ノース", "south": "サウス", "east": "イースト", "west": "ウエスト",
    "mount": "マウント", "saint": "セイント", "street": "ストリート",
    "john": "ジョン", "smith": "スミス", "james": "ジェームズ", "mary": "メアリー",
    "michael": "マイケル", "david": "デイビッド", "william": "ウィリアム",
    "robert": "ロバート", "thomas": "トーマス", "george": "ジョージ",
    "sarah": "サラ", "emily": "エミリー", "paris": "パリ",
    # spelling patterns
    "ough": "オー", "ought": "オート", "augh": "オー", "igh": "アイ",
    "tion": "ション", "sion": "ション", "cial": "シャル", "tial": "シャル",
    "ture": "チャー", "dge": "ッジ",
    "ie": "アイ", "ou": "アウ", "ew": "ユー",
    # Gaelic prefixes
    "mac": "マック", "mc": "マク",
    # single letters
    "n": "ン", "y": "イ",
}


def _build_phonetic_dictionary() -> Mapping[str, str]:
    table: Dict[str, str] = {}

    for onset, row in _SYLLABLES.items():
        for vowel, kana in zip(_GRID_VOWELS, row):
            table[onset + vowel] = kana
        for spelling, (column, suffix) in _VOWEL_DIGRAPHS.items():
            table[onset + spelling] = row[column] + suffix
        if len(onset) == 1 and onset not in "yw":
            # final -y reads as a long i ("mary" -> マリー)
            table[onset + "y"] = row[1] + "ー"
        if onset in _EW_ONSETS:
            table[onset + "ew"] = row[1] + "ュー"

    for onset, (ya, yu, yo) in _YOON.items():
        table[onset + "a"] = ya
        table[onset + "u"] = yu
        table[onset + "o"] = yo

    table.update(_LONE_ONSETS)

    for consonant in _SOKUON_GEMINATES + _NASAL_GEMINATES + _PLAIN_GEMINATES:
        row = _SYLLABLES[consonant]
        if consonant in _SOKUON_GEMINATES:
            prefix = "ッ"
        elif consonant in _NASAL_GEMINATES:
            prefix = "ン"
        else:
            prefix = ""
        for vowel, kana in zip(_GRID_VOWELS, row):
            table[consonant * 2 + vowel] = prefix + kana
        if consonant in _NASAL_GEMINATES:
            table[consonant * 2] = "ン" if consonant == "n" else row[2]
        else:
            table[consonant * 2] = prefix + row[2]
    for vowel, kana in zip(_GRID_VOWELS, _SYLLABLES["k"]):
        table["ck" + vowel] = "ッ" + kana

    table.update(_WORDS)

    for key in table:
        if not key or len(key) > MAX_KEY_LENGTH or key != key.lower():
            raise ValueError(f"Invalid phonetic dictionary key: {key!r}")
    return MappingProxyType(table)


_PHONETIC_DICTIONARY = _build_phonetic_dictionary()


def phonetic_dictionary() -> Mapping[str, str]:
    """Read-only lowercase Latin -> Katakana dictionary."""
    return _PHONETIC_DICTIONARY


# ──────────────────────────────────────────────────────────────────────────────
# POST-PROCESSING RULES
# ──────────────────────────────────────────────────────────────────────────────
_LONG_VOWEL_RULES = (
    ("アア", "アー"),
    ("イイ", "イー"),
    ("ウウ", "ウー"),
    ("エエ", "エー"),
    ("オオ", "オー"),
    # diphthongs read as long vowels
    ("エイ", "エー"),
    ("オウ", "オー"),
    ("ビィ", "ビー"),
    ("ティィ", "ティー"),
    ("ディィ", "ディー"),
)


def _strip_accent(ch: str) -> str:
    # Latin-1 Supplement and Latin Extended-A/B only; kana keep their dakuten
    if not 0x00C0 <= ord(ch) < 0x0250:
        return ch
    decomposed = unicodedata.normalize("NFKD", ch)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


class JapaneseTransliterator(BaseTransliterator):
    """Best-effort English -> Katakana transliterator for proper nouns."""

    def __init__(self, dictionary: Mapping[str, str] = None, max_key_length: int = MAX_KEY_LENGTH):
        self._dictionary = dictionary if dictionary is not None else _PHONETIC_DICTIONARY
        self._max_key_length = max_key_length

    def transliterate(self, text: str) -> str:
        """Transliterate each whitespace-delimited word and join them with "・".

        Empty or whitespace-only input is returned unchanged.
        """
        require_text(text)
        if not text.strip():
            return text
        return WORD_SEPARATOR.join(self.transliterate_word(word) for word in text.split())

    def transliterate_word(self, word: str) -> str:
        normalized = self._normalize(word)
        whole = self._dictionary.get(normalized)
        if whole is not None:
            return whole

        result = self._postprocess(self._scan(self._preprocess(normalized)))
        # never return an empty reading for a non-empty word
        return result or word

    @staticmethod
    def _normalize(word: str) -> str:
        """Full-width ASCII to half-width, strip accents from Latin letters, lowercase."""
        word = jaconv.z2h(word, kana=False, ascii=True, digit=True)
        return "".join(_strip_accent(ch) for ch in word).lower()

    @staticmethod
    def _preprocess(word: str) -> str:
        # silent e ("mike" -> "mik")
        if word.endswith("e"):
            return word[:-1]
        return word

    def _scan(self, word: str) -> str:
        """Greedy longest-match scan; the cursor never moves back."""
        kana: List[str] = []
        i = 0
        while i < len(word):
            for length in range(min(self._max_key_length, len(word) - i), 0, -1):
                match = self._dictionary.get(word[i:i + length])
                if match is not None:
                    kana.append(match)
                    i += length
                    break
            else:
                kana.append(self._fallback(word, i))
                i += 1
        return "".join(kana)

    def _fallback(self, word: str, i: int) -> str:
        ch = word[i]
        if ch in CONSONANTS:
            following = word[i + 1] if i + 1 < len(word) else ""
            if not following or following in CONSONANTS:
                # lone consonant takes the default vowel u
                return self._dictionary.get(ch + "u", ch)
            logger.debug(f"Unmapped consonant '{ch}' before '{following}' in '{word}'")
            return ch
        mapped = self._dictionary.get(ch)
        if mapped is None:
            logger.debug(f"Unmapped character '{ch}' in '{word}'")
            return ch
        return mapped

    @staticmethod
    def _postprocess(kana: str) -> str:
        result = kana.replace("nン", "ン")
        for source, target in _LONG_VOWEL_RULES:
            result = result.replace(source, target)
        if len(result) > 2 and result.endswith(("イ", "ウ")):
            result += "ー"
        return result


_transliterator = JapaneseTransliterator()


def transliterate(text: str) -> str:
    return _transliterator.transliterate(text)
