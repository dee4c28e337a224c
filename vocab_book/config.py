from __future__ import annotations

import codecs
import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "encoding": "utf-8",
    "host": "127.0.0.1",
    "port": 8765,
    "default_dir": "",
    "log_level": "INFO",
}


@dataclass
class Settings:
    encoding: str = DEFAULTS["encoding"]
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]
    default_dir: str = DEFAULTS["default_dir"]
    log_level: str = DEFAULTS["log_level"]

    def resolve_path(self, path: str | Path) -> Path:
        """Resolve a relative path against default_dir, when one is set."""
        p = Path(path).expanduser()
        if p.is_absolute() or not self.default_dir:
            return p
        return Path(self.default_dir).expanduser() / p

    def to_dict(self) -> dict:
        return {
            "encoding": self.encoding,
            "host": self.host,
            "port": self.port,
            "default_dir": self.default_dir,
            "log_level": self.log_level,
        }


def check_encoding(name: str) -> str:
    """Return the canonical codec name for an ASCII-compatible encoding.

    Files are split into lines on the raw newline byte before decoding, so
    the separator bytes must decode to the same characters as in ASCII.
    Raises LookupError for unknown names, ValueError for encodings such as
    UTF-16 that do not qualify.
    """
    if not isinstance(name, str):
        raise TypeError("encoding must be a string")
    info = codecs.lookup(name)
    sample = b"\n,|"
    try:
        ascii_compatible = sample.decode(info.name) == sample.decode("ascii")
    except UnicodeDecodeError:
        ascii_compatible = False
    if not ascii_compatible:
        raise ValueError(f"{name} is not an ASCII-compatible encoding")
    return info.name


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
