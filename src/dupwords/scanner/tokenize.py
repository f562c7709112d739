"""Split a line into word runs and the separators between them."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RUN_RE = re.compile(r"\w+|\W+")


@dataclass(frozen=True)
class Token:
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_word(self) -> bool:
        """A bare word: a whole run of word characters that are all letters."""
        return self.text.isalpha()

    @property
    def is_space(self) -> bool:
        return self.text.isspace()


def tokenize(text: str) -> list[Token]:
    return [Token(m.group(0), m.start()) for m in _RUN_RE.finditer(text)]


def trailing_word(text: str) -> str:
    tokens = tokenize(text.rstrip())
    if tokens and tokens[-1].is_word:
        return tokens[-1].text
    return ""
