"""Kanji and kana frequency crawler."""

__version__ = "0.1.0"
