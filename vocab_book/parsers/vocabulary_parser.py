"""Parse line-oriented vocabulary files into VocabularyItem objects.

One record per line:
  word,reading,meaning1,meaning2,...|||note

The note part is optional and starts at the first ``|||``. Lines with fewer
than two comma-separated fields, or with an empty word or reading, are skipped
without error, as are lines that do not decode in the requested encoding.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from vocab_book.errors import SourceUnavailable
from vocab_book.models import ParseReport, SkippedLine, VocabularyItem

NOTE_SEPARATOR = "|||"
FIELD_SEPARATOR = ","

log = logging.getLogger("vocab_book.parser")


def parse_vocab_line(line: str) -> VocabularyItem | None:
    main_part, sep, note_part = line.partition(NOTE_SEPARATOR)
    note = note_part.strip() if sep else None

    fields = main_part.split(FIELD_SEPARATOR)
    if len(fields) < 2 or not fields[0] or not fields[1]:
        return None

    return VocabularyItem(
        word=fields[0],
        reading=fields[1],
        meanings=tuple(fields[2:]),
        note=note or None,
    )


def parse_vocab_lines(lines: Iterable[str]) -> list[VocabularyItem]:
    items = []
    for line in lines:
        item = parse_vocab_line(line)
        if item is not None:
            items.append(item)
    return items


def _read_lines(path: Path, encoding: str) -> Iterator[tuple[int, str | None]]:
    """Yield (line_number, text) pairs; text is None for undecodable lines."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceUnavailable(str(e)) from e

    raw_lines = data.split(b"\n")
    # A trailing newline terminates the last line, it does not start a new one
    if raw_lines and raw_lines[-1] == b"":
        raw_lines.pop()

    for number, raw in enumerate(raw_lines, start=1):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            yield number, raw.decode(encoding)
        except UnicodeDecodeError:
            yield number, None


def scan_vocab_file(path: Path | str, encoding: str = "utf-8") -> ParseReport:
    """Parse a vocabulary file and record why each dropped line was dropped.

    Raises SourceUnavailable if the file cannot be read at all.
    """
    path = Path(path)
    report = ParseReport()

    for number, text in _read_lines(path, encoding):
        report.total_lines = number
        if text is None:
            log.debug("%s:%d: undecodable as %s, skipped", path.name, number, encoding)
            report.skipped.append(SkippedLine(number, "undecodable", None))
            continue
        item = parse_vocab_line(text)
        if item is not None:
            report.items.append(item)
            continue
        if not text.strip():
            reason = "blank"
        elif len(text.partition(NOTE_SEPARATOR)[0].split(FIELD_SEPARATOR)) < 2:
            reason = "too_few_fields"
        else:
            reason = "empty_word_or_reading"
        log.debug("%s:%d: %s, skipped", path.name, number, reason)
        report.skipped.append(SkippedLine(number, reason, text))

    log.info(
        "Parsed %s: %d items, %d lines skipped",
        path.name, len(report.items), len(report.skipped),
    )
    return report


def parse_vocab_file(path: Path | str, encoding: str = "utf-8") -> list[VocabularyItem]:
    return scan_vocab_file(path, encoding).items
