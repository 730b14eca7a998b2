"""Tests for the frequency counter."""

from kanjifreq.counter import FrequencyCounter
from kanjifreq.script import ScriptClass


class TestObserve:
    def test_observe_is_additive(self):
        counter = FrequencyCounter()
        counter.observe("日")
        counter.observe("あ")
        for _ in range(4):
            counter.observe("本")

        assert counter.kanji["本"] == 4
        assert counter.kanji["日"] == 1
        assert counter.hiragana["あ"] == 1
        assert counter.total_count == 6

    def test_ignores_other_characters(self):
        counter = FrequencyCounter()
        counter.observe_text("<p>Hello, world!</p>")
        assert counter.total_count == 0
        assert all(not mapping for mapping in counter.counts.values())

    def test_observe_text_buckets_by_script(self):
        counter = FrequencyCounter()
        counter.observe_text("<p>日本語のテキスト</p>")

        assert dict(counter.kanji) == {"日": 1, "本": 1, "語": 1}
        assert dict(counter.hiragana) == {"の": 1}
        assert dict(counter.katakana) == {"テ": 1, "キ": 1, "ス": 1, "ト": 1}
        assert counter.total_count == 8

    def test_overlapping_predicates_count_twice(self, monkeypatch):
        """A character matched by two classes lands in both and counts twice."""
        from kanjifreq import counter as counter_module

        overlapping = {
            ScriptClass.KANJI: lambda c: c == "x",
            ScriptClass.HIRAGANA: lambda c: c == "x",
            ScriptClass.KATAKANA: lambda c: False,
        }
        monkeypatch.setattr(counter_module, "PREDICATES", overlapping)

        counter = FrequencyCounter()
        counter.observe("x")

        assert counter.kanji["x"] == 1
        assert counter.hiragana["x"] == 1
        assert counter.total_count == 2


class TestFinalize:
    def test_derived_counts(self):
        counter = FrequencyCounter()
        counter.observe_text("日日本あいいアイウ")
        counter.finalize()

        assert counter.kanji_unique_count == 2
        assert counter.hiragana_unique_count == 2
        assert counter.katakana_unique_count == 3
        assert counter.unique_count == 7
        assert counter.kana_unique_count == 5

    def test_kana_unique_count_is_union(self):
        counter = FrequencyCounter()
        counter.hiragana["x"] = 1
        counter.katakana["x"] = 2
        counter.katakana["y"] = 1
        counter.finalize()

        assert counter.unique_count == 3
        assert counter.kana_unique_count == 2

    def test_empty_counter(self):
        counter = FrequencyCounter().finalize()
        assert counter.unique_count == 0
        assert counter.kana_unique_count == 0
        assert counter.total_count == 0

    def test_finalize_reflects_current_state(self):
        counter = FrequencyCounter()
        counter.observe("日")
        counter.finalize()
        assert counter.kanji_unique_count == 1

        counter.observe("本")
        assert counter.kanji_unique_count == 1
        counter.finalize()
        assert counter.kanji_unique_count == 2

    def test_finalize_twice_is_stable(self):
        counter = FrequencyCounter()
        counter.observe_text("日本あア")
        counter.finalize()
        first = (counter.unique_count, counter.kana_unique_count)
        counter.finalize()
        assert (counter.unique_count, counter.kana_unique_count) == first

    def test_unique_count_for(self):
        counter = FrequencyCounter()
        counter.observe_text("日あア")
        counter.finalize()
        for script in ScriptClass:
            assert counter.unique_count_for(script) == 1
