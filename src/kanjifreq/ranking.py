"""Frequency ranking."""

from collections.abc import Mapping


def rank(mapping: Mapping[str, int]) -> list[str]:
    """Keys of ``mapping`` by descending count, ties by ascending code point."""
    return sorted(mapping, key=lambda char: (-mapping[char], char))


def top(mapping: Mapping[str, int], size: int) -> list[tuple[int, str, int]]:
    """First ``size`` ranked entries as ``(rank, char, count)`` tuples."""
    ranked = rank(mapping)[:max(size, 0)]
    return [(i, char, mapping[char]) for i, char in enumerate(ranked, 1)]
