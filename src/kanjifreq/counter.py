"""Per-script character frequency counting."""

from collections import Counter

from .script import PREDICATES, ScriptClass


class FrequencyCounter:
    """Tallies Kanji, Hiragana and Katakana occurrences.

    Each script predicate is consulted independently, so a character that
    matched two classes would be counted in both mappings and twice in
    ``total_count``. Derived counts are only meaningful after ``finalize()``.
    """

    def __init__(self):
        self.total_count = 0
        self.counts: dict[ScriptClass, Counter[str]] = {
            script: Counter() for script in ScriptClass
        }

        self.unique_count = 0
        self.kana_unique_count = 0
        self.kanji_unique_count = 0
        self.hiragana_unique_count = 0
        self.katakana_unique_count = 0

    @property
    def kanji(self) -> Counter[str]:
        return self.counts[ScriptClass.KANJI]

    @property
    def hiragana(self) -> Counter[str]:
        return self.counts[ScriptClass.HIRAGANA]

    @property
    def katakana(self) -> Counter[str]:
        return self.counts[ScriptClass.KATAKANA]

    def observe(self, char: str):
        """Count one character against every script class it belongs to."""
        for script, predicate in PREDICATES.items():
            if predicate(char):
                self.counts[script][char] += 1
                self.total_count += 1

    def observe_text(self, text: str):
        """Observe every character of ``text`` in document order."""
        for char in text:
            self.observe(char)

    def finalize(self) -> "FrequencyCounter":
        """Recompute the derived counts from the current mappings."""
        self.kanji_unique_count = len(self.kanji)
        self.hiragana_unique_count = len(self.hiragana)
        self.katakana_unique_count = len(self.katakana)
        self.unique_count = sum(len(mapping) for mapping in self.counts.values())
        self.kana_unique_count = len(self.hiragana.keys() | self.katakana.keys())
        return self

    def unique_count_for(self, script: ScriptClass) -> int:
        return {
            ScriptClass.KANJI: self.kanji_unique_count,
            ScriptClass.HIRAGANA: self.hiragana_unique_count,
            ScriptClass.KATAKANA: self.katakana_unique_count,
        }[script]
