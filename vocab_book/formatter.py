"""Render VocabularyItem objects back into the line format the parser reads."""
from __future__ import annotations

from collections.abc import Iterable

from vocab_book.models import VocabularyItem
from vocab_book.parsers.vocabulary_parser import FIELD_SEPARATOR, NOTE_SEPARATOR


def format_vocab_line(item: VocabularyItem) -> str:
    line = FIELD_SEPARATOR.join([item.word, item.reading, *item.meanings])
    if item.note:
        # One record per line, so a multi-line note is folded
        line += NOTE_SEPARATOR + " ".join(item.note.splitlines())
    return line


def format_vocab_text(items: Iterable[VocabularyItem]) -> str:
    return "".join(format_vocab_line(item) + "\n" for item in items)
