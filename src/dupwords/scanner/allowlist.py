from __future__ import annotations

from typing import Iterable

# Words that legitimately appear twice in a row ("long long", "that that").
DEFAULT_ALLOWED: frozenset[str] = frozenset({"long", "method", "default", "that"})


def build_allowed(extra: Iterable[str] = ()) -> frozenset[str]:
    return DEFAULT_ALLOWED | frozenset(word.strip().casefold() for word in extra if word.strip())


def is_allowed(word: str, allowed: frozenset[str] = DEFAULT_ALLOWED) -> bool:
    return word.casefold() in allowed
