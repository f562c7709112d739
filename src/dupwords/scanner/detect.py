from __future__ import annotations

from .tokenize import tokenize

MARKUP_OPEN = "<"


def _is_markup_tag(word: str, text: str, end: int) -> bool:
    # `C C<foo>`: a one-letter formatting code right before its opening bracket.
    return len(word) == 1 and text[end:end + 1] == MARKUP_OPEN


def find_duplicates(text: str) -> list[str]:
    """Return the first occurrence of every adjacent repeated word in `text`.

    Two word tokens count as a repeat when only whitespace separates them and
    they compare equal case-insensitively. Matches never overlap, so
    "the the the" reports a single repeat.
    """
    tokens = tokenize(text)
    found: list[str] = []
    i = 0
    while i + 2 < len(tokens):
        first, sep, second = tokens[i], tokens[i + 1], tokens[i + 2]
        if (
            first.is_word
            and sep.is_space
            and second.is_word
            and first.text.casefold() == second.text.casefold()
            and not _is_markup_tag(second.text, text, second.end)
        ):
            found.append(first.text)
            i += 3
            continue
        i += 1
    return found
