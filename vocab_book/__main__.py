"""CLI entry point for vocab-book.

Usage:
  python -m vocab_book serve [--port PORT] [--host HOST]
  python -m vocab_book parse FILE
  python -m vocab_book check FILE
  python -m vocab_book export ITEMS_JSON OUT_FILE
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

from vocab_book.errors import VocabBookError

COMMANDS = "serve, parse, check, export"


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv
    command = args[0] if args else "serve"

    try:
        if command == "serve":
            _serve(args[1:])
        elif command == "parse":
            _parse(args[1:])
        elif command == "check":
            _check(args[1:])
        elif command == "export":
            _export(args[1:])
        else:
            print(f"Unknown command: {command}")
            print(f"Commands: {COMMANDS}")
            sys.exit(1)
    except VocabBookError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _require_args(args: list[str], count: int, usage: str) -> None:
    if len(args) < count:
        print(f"Usage: python -m vocab_book {usage}")
        sys.exit(1)


def _serve(args: list[str]):
    import uvicorn

    from vocab_book.config import load_settings

    settings = load_settings()
    port = int(_parse_flag(args, "--port", str(settings.port)))
    host = _parse_flag(args, "--host", settings.host)

    print(f"Starting Vocab Book on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run(
        "vocab_book.app:app",
        host=host,
        port=port,
        reload=False,
        timeout_graceful_shutdown=5,
    )


def _parse(args: list[str]):
    from vocab_book.config import load_settings
    from vocab_book.parsers.vocabulary_parser import parse_vocab_file

    _require_args(args, 1, "parse FILE")
    settings = load_settings()
    items = parse_vocab_file(settings.resolve_path(args[0]), settings.encoding)
    print(json.dumps([i.to_dict() for i in items], indent=2, ensure_ascii=False))


def _check(args: list[str]):
    from vocab_book.config import load_settings
    from vocab_book.parsers.vocabulary_parser import scan_vocab_file

    _require_args(args, 1, "check FILE")
    settings = load_settings()
    path = settings.resolve_path(args[0])
    report = scan_vocab_file(path, settings.encoding)

    print(f"{path.name}: {report.total_lines} lines")
    print(f"  items:   {len(report.items)}")
    print(f"  skipped: {len(report.skipped)}")
    for s in report.skipped:
        text = "<undecodable>" if s.text is None else repr(s.text)
        print(f"    line {s.line_number:>5}  {s.reason:22s} {text}")


def _export(args: list[str]):
    from vocab_book.config import load_settings
    from vocab_book.formatter import format_vocab_text
    from vocab_book.models import VocabularyItem
    from vocab_book.storage import write_text_file

    _require_args(args, 2, "export ITEMS_JSON OUT_FILE")
    settings = load_settings()
    try:
        raw = json.loads(Path(args[0]).read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise TypeError("items file must hold a JSON list")
        items = [VocabularyItem.from_dict(d) for d in raw]
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        print(f"Error: cannot read items from {args[0]}: {e}", file=sys.stderr)
        sys.exit(1)
    out = settings.resolve_path(args[1])
    write_text_file(out, format_vocab_text(items), settings.encoding)
    print(f"Wrote {len(items)} items to {out}")


if __name__ == "__main__":
    main()
