"""Operations exposed to the application shell.

Each call runs its blocking file I/O on a worker thread so the caller's
event loop stays responsive. Calls share no state and can run concurrently.
Failures are raised as VocabBookError subclasses whose message is meant to
be shown to the user as-is.
"""
from __future__ import annotations

import asyncio
from pathlib import Path

from vocab_book.models import ParseReport, VocabularyItem
from vocab_book.parsers import vocabulary_parser
from vocab_book.storage import write_text_file


async def parse_vocab_file(path: Path | str, encoding: str = "utf-8") -> list[VocabularyItem]:
    return await asyncio.to_thread(vocabulary_parser.parse_vocab_file, path, encoding)


async def scan_vocab_file(path: Path | str, encoding: str = "utf-8") -> ParseReport:
    return await asyncio.to_thread(vocabulary_parser.scan_vocab_file, path, encoding)


async def save_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> None:
    await asyncio.to_thread(write_text_file, path, content, encoding)
