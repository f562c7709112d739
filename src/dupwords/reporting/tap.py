"""Test Anything Protocol rendering of per-file results."""

from __future__ import annotations

from typing import Sequence

from ..scanner.model import FileResult


def render_tap(results: Sequence[FileResult]) -> str:
    lines = [f"1..{len(results)}"]
    for idx, result in enumerate(results, start=1):
        if result.passed:
            lines.append(f"ok {idx} - {result.path}")
            continue
        lines.append(f"not ok {idx} - {result.path}")
        lines.extend(f"# {row}" for row in result.message.splitlines())
    return "\n".join(lines)
