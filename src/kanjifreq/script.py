"""Japanese script classification and kana romanization."""

from enum import Enum
from functools import lru_cache

import pykakasi


class ScriptClass(str, Enum):
    """Script classes tallied by the frequency counter."""

    KANJI = "kanji"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"


# Inclusive code point ranges of the Han, Hiragana and Katakana scripts.
KANJI_RANGES = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2EBEF),
    (0x2F800, 0x2FA1D),
    (0x30000, 0x323AF),
)

HIRAGANA_RANGES = (
    (0x3041, 0x3096),
    (0x309D, 0x309F),
    (0x1B001, 0x1B11F),
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),
    (0x1F200, 0x1F200),
)

KATAKANA_RANGES = (
    (0x30A1, 0x30FA),
    (0x30FC, 0x30FF),
    (0x31F0, 0x31FF),
    (0x32D0, 0x32FE),
    (0x3300, 0x3357),
    (0xFF66, 0xFF6F),
    (0xFF71, 0xFF9D),
    (0x1AFF0, 0x1AFF3),
    (0x1AFF5, 0x1AFFB),
    (0x1AFFD, 0x1AFFE),
    (0x1B000, 0x1B000),
    (0x1B120, 0x1B122),
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),
)


def _in_ranges(char: str, ranges: tuple[tuple[int, int], ...]) -> bool:
    if len(char) != 1:
        return False
    code = ord(char)
    return any(low <= code <= high for low, high in ranges)


def is_kanji(char: str) -> bool:
    return _in_ranges(char, KANJI_RANGES)


def is_hiragana(char: str) -> bool:
    return _in_ranges(char, HIRAGANA_RANGES)


def is_katakana(char: str) -> bool:
    return _in_ranges(char, KATAKANA_RANGES)


PREDICATES = {
    ScriptClass.KANJI: is_kanji,
    ScriptClass.HIRAGANA: is_hiragana,
    ScriptClass.KATAKANA: is_katakana,
}


def classify(char: str) -> ScriptClass | None:
    """Return the first script class matching ``char``, or None."""
    for script, predicate in PREDICATES.items():
        if predicate(char):
            return script
    return None


@lru_cache(maxsize=1)
def _kakasi() -> pykakasi.kakasi:
    return pykakasi.kakasi()


@lru_cache(maxsize=None)
def romanize(char: str) -> str | None:
    """Hepburn romaji for a kana character, or None if there is none."""
    if not (is_hiragana(char) or is_katakana(char)):
        return None
    parts = _kakasi().convert(char)
    romaji = "".join(part.get("hepburn", "") for part in parts).strip()
    if not romaji or romaji == char:
        return None
    return romaji
