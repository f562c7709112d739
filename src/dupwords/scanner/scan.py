from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from ..errors import io_error
from .allowlist import DEFAULT_ALLOWED
from .model import Dialect, DocFile, FileResult, Finding
from .state import ScanState, process_line


def scan_lines(
    lines: Iterable[str],
    dialect: Dialect,
    allowed: frozenset[str] = DEFAULT_ALLOWED,
) -> list[Finding]:
    state = ScanState()
    for line in lines:
        process_line(state, line, dialect, allowed)
    return state.findings


def _read_lines(path: Path) -> Iterator[str]:
    with path.open("r", encoding="utf-8", newline="") as f:
        for raw in f:
            yield raw.rstrip("\r\n")


def scan_file(doc: DocFile, allowed: frozenset[str] = DEFAULT_ALLOWED, display: str | None = None) -> FileResult:
    try:
        findings = scan_lines(_read_lines(doc.path), doc.dialect, allowed)
    except (OSError, UnicodeDecodeError) as exc:
        raise io_error("read", doc.path, exc) from exc
    return FileResult(display or doc.path.as_posix(), doc.dialect, tuple(findings))
