"""Text and JSON rendering of a finalized frequency counter."""

import math

import typer

from .counter import FrequencyCounter
from .ranking import top
from .script import ScriptClass, romanize

LABELS = {
    ScriptClass.KANJI: "Kanji",
    ScriptClass.HIRAGANA: "Hiragana",
    ScriptClass.KATAKANA: "Katakana",
}


def format_entry(position: int, char: str, count: int) -> str:
    """Render one ranking entry, annotating kana with romaji."""
    romaji = romanize(char)
    if romaji:
        return f"{position:4d}. {char} [{romaji}] ({count})"
    return f"{position:4d}. {char} ({count})"


def ranking_lines(entries: list[tuple[int, str, int]]) -> list[str]:
    """Lay ranking entries out in rows of ``max(5, sqrt(n))`` columns."""
    if not entries:
        return []
    cols = max(5, int(math.sqrt(len(entries))))
    cells = [format_entry(*entry) for entry in entries]
    return ["\t".join(cells[i:i + cols]) for i in range(0, len(cells), cols)]


def script_section(counter: FrequencyCounter, script: ScriptClass, ranking_size: int) -> list[str]:
    entries = top(counter.counts[script], ranking_size)
    if not entries:
        return []
    return [f"{len(entries)} most common {LABELS[script]} characters:", *ranking_lines(entries)]


def report_lines(counter: FrequencyCounter, ranking_size: int) -> list[str]:
    """Build the full text report."""
    lines = [
        f"All Japanese characters found: {counter.total_count}",
        f"Kanji unique count: {counter.kanji_unique_count}",
    ]
    lines += script_section(counter, ScriptClass.KANJI, ranking_size)
    lines += [
        f"Kana unique count: {counter.kana_unique_count}",
        f"Katakana unique count: {counter.katakana_unique_count}",
        f"Hiragana unique count: {counter.hiragana_unique_count}",
    ]
    lines += script_section(counter, ScriptClass.KATAKANA, ranking_size)
    lines += script_section(counter, ScriptClass.HIRAGANA, ranking_size)
    return lines


def print_report(counter: FrequencyCounter, ranking_size: int):
    for line in report_lines(counter, ranking_size):
        typer.echo(line)


def report_dict(counter: FrequencyCounter, ranking_size: int) -> dict:
    """Machine-readable form of the report."""
    result = {
        "total_count": counter.total_count,
        "unique_count": counter.unique_count,
        "kana_unique_count": counter.kana_unique_count,
    }
    for script in ScriptClass:
        result[script.value] = {
            "unique_count": counter.unique_count_for(script),
            "ranking": [
                {"rank": position, "char": char, "count": count, "romaji": romanize(char)}
                for position, char, count in top(counter.counts[script], ranking_size)
            ],
        }
    return result
