"""Shared test fixtures."""
from __future__ import annotations

import pytest

from vocab_book.models import VocabularyItem


@pytest.fixture
def sample_items():
    """A small list of VocabularyItem objects for testing."""
    return [
        VocabularyItem("猫", "neko", ("cat", "feline")),
        VocabularyItem("犬", "inu", ()),
        VocabularyItem("bird", "tori", ("flying animal",), "pet note"),
    ]


@pytest.fixture
def vocab_txt_content():
    """Vocabulary file with valid lines mixed with lines the parser drops."""
    return """\
猫,neko,cat,feline
犬,inu

bird,tori,flying animal|||pet note
onlyword
魚,sakana,fish,,|||   
,empty,word
木,ki,tree|||grows|||tall
"""


@pytest.fixture
def vocab_file(tmp_path, vocab_txt_content):
    f = tmp_path / "vocab.txt"
    f.write_text(vocab_txt_content, encoding="utf-8")
    return f
