"""Dictionary loading.

A dictionary source is any text of whitespace-separated tokens (a system
word list has one per line).  Only tokens made of exactly ``word_length``
ASCII letters are kept; they are upper-cased, and case variants such as
``Crane`` / ``crane`` collapse into one entry.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from constraints import WORD_LENGTH
from wordle_errors import DuplicateWordError

DEFAULT_DICT_PATH = Path("/usr/share/dict/words")


def _pattern(word_length: int) -> re.Pattern[str]:
    return re.compile(rf"^[A-Za-z]{{{word_length}}}$")


def read_words(
    source: str | Iterable[str],
    word_length: int = WORD_LENGTH,
    strict: bool = False,
) -> set[str]:
    """Collect the valid words from *source*.

    Parameters
    ----------
    source : str or iterable of str
        Raw text, or an iterable of chunks (e.g. lines of an open file).
    word_length : int
        Only keep tokens of this exact length.
    strict : bool
        If True, raise on two tokens normalising to the same word instead
        of silently keeping one.

    Raises
    ------
    DuplicateWordError
        Only with ``strict=True``, on the first collision.
    """
    if isinstance(source, str):
        source = [source]
    pattern = _pattern(word_length)
    words: set[str] = set()
    for chunk in source:
        for token in chunk.split():
            if not pattern.match(token):
                continue
            w = token.upper()
            if w in words:
                if strict:
                    raise DuplicateWordError(f"duplicate dictionary entry: {w}")
                continue
            words.add(w)
    return words


def load_words(
    path: str | Path | None = None,
    word_length: int = WORD_LENGTH,
    strict: bool = False,
) -> set[str]:
    """Load the candidate words from a dictionary file.

    ``None`` falls back to the system word list at ``/usr/share/dict/words``.
    """
    src = Path(path) if path is not None else DEFAULT_DICT_PATH
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    with src.open("r", encoding="utf-8", errors="ignore") as f:
        words = read_words(f, word_length=word_length, strict=strict)

    if not words:
        raise ValueError(f"No {word_length}-letter words found in {src}")
    return words
