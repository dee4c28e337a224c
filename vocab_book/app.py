"""FastAPI application exposing the parse and save operations."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request

from vocab_book import commands
from vocab_book.config import Settings, check_encoding, load_settings, save_settings
from vocab_book.errors import DestinationUnavailable, SourceUnavailable, WriteIncomplete
from vocab_book.formatter import format_vocab_text
from vocab_book.models import VocabularyItem

app = FastAPI(title="Vocab Book")

# Loaded on startup (tests set it directly)
_settings: Settings | None = None

_api_log = logging.getLogger("vocab_book.api")


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    logging.getLogger("vocab_book").setLevel(_settings.log_level.upper())


async def _read_body(request: Request) -> dict:
    body = await request.json() if await request.body() else {}
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _require_path(body: dict) -> str:
    path = body.get("path")
    if not isinstance(path, str) or not path.strip():
        raise HTTPException(400, "No path provided")
    return path


# ── API: Vocabulary files ────────────────────────────────────────────────

@app.post("/api/vocab/parse")
async def api_parse(request: Request):
    body = await _read_body(request)
    s = get_settings()
    path = s.resolve_path(_require_path(body))
    try:
        items = await commands.parse_vocab_file(path, s.encoding)
    except SourceUnavailable as e:
        _api_log.warning("Parse failed for %s: %s", path, e)
        raise HTTPException(404, str(e))
    return {"items": [i.to_dict() for i in items], "count": len(items)}


@app.post("/api/vocab/scan")
async def api_scan(request: Request):
    body = await _read_body(request)
    s = get_settings()
    path = s.resolve_path(_require_path(body))
    try:
        report = await commands.scan_vocab_file(path, s.encoding)
    except SourceUnavailable as e:
        _api_log.warning("Scan failed for %s: %s", path, e)
        raise HTTPException(404, str(e))
    return report.to_dict()


async def _save(path, content: str, encoding: str) -> dict:
    try:
        await commands.save_text_file(path, content, encoding)
    except DestinationUnavailable as e:
        raise HTTPException(400, str(e))
    except WriteIncomplete as e:
        raise HTTPException(500, str(e))
    return {"ok": True}


@app.post("/api/vocab/save")
async def api_save(request: Request):
    body = await _read_body(request)
    s = get_settings()
    path = s.resolve_path(_require_path(body))
    content = body.get("content")
    if not isinstance(content, str):
        raise HTTPException(400, "No content provided")
    return await _save(path, content, s.encoding)


@app.post("/api/vocab/export")
async def api_export(request: Request):
    body = await _read_body(request)
    s = get_settings()
    path = s.resolve_path(_require_path(body))
    raw_items = body.get("items")
    if not isinstance(raw_items, list):
        raise HTTPException(400, "No items provided")
    try:
        items = [VocabularyItem.from_dict(d) for d in raw_items]
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(400, f"Invalid item: {e}")
    result = await _save(path, format_vocab_text(items), s.encoding)
    result["count"] = len(items)
    return result


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await request.json()
    s = get_settings()
    if "encoding" in body:
        try:
            check_encoding(body["encoding"])
        except (LookupError, TypeError, ValueError) as e:
            raise HTTPException(400, f"Invalid encoding: {e}")
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    return s.to_dict()
