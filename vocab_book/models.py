from __future__ import annotations

from dataclasses import dataclass, field

# Must match vocab_book.parsers.vocabulary_parser
_FIELD_SEPARATOR = ","
_NOTE_SEPARATOR = "|||"


@dataclass(frozen=True)
class VocabularyItem:
    word: str
    reading: str
    meanings: tuple[str, ...] = ()
    note: str | None = None

    def __post_init__(self):
        # Empty meanings are dropped, a blank note means no note
        object.__setattr__(self, "meanings", tuple(m for m in self.meanings if m))
        if self.note is not None:
            note = self.note.strip()
            object.__setattr__(self, "note", note or None)

        if not self.word or not self.reading:
            raise ValueError("word and reading must not be empty")
        for value in (self.word, self.reading, *self.meanings):
            if _FIELD_SEPARATOR in value or _NOTE_SEPARATOR in value or "\n" in value:
                raise ValueError(f"field contains a separator or newline: {value!r}")

    def to_dict(self) -> dict:
        d = {
            "word": self.word,
            "reading": self.reading,
            "meanings": list(self.meanings),
        }
        if self.note is not None:
            d["note"] = self.note
        return d

    @classmethod
    def from_dict(cls, data: dict) -> VocabularyItem:
        if not isinstance(data, dict):
            raise TypeError(f"item must be an object, got {type(data).__name__}")
        word, reading = data["word"], data["reading"]
        meanings = data.get("meanings") or []
        note = data.get("note")
        if not isinstance(word, str) or not isinstance(reading, str):
            raise TypeError("word and reading must be strings")
        if not isinstance(meanings, list) or not all(isinstance(m, str) for m in meanings):
            raise TypeError("meanings must be a list of strings")
        if note is not None and not isinstance(note, str):
            raise TypeError("note must be a string")
        return cls(word=word, reading=reading, meanings=tuple(meanings), note=note)


@dataclass(frozen=True)
class SkippedLine:
    line_number: int  # 1-based
    reason: str  # blank | too_few_fields | empty_word_or_reading | undecodable
    text: str | None  # None when the line could not be decoded

    def to_dict(self) -> dict:
        return {"line_number": self.line_number, "reason": self.reason, "text": self.text}


@dataclass
class ParseReport:
    items: list[VocabularyItem] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
    total_lines: int = 0

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() for i in self.items],
            "skipped": [s.to_dict() for s in self.skipped],
            "total_lines": self.total_lines,
        }
