from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from .allowlist import DEFAULT_ALLOWED, is_allowed
from .detect import find_duplicates
from .model import Dialect, Finding
from .tokenize import trailing_word

DIRECTIVE_MARKER = "="
CONTINUATION_INDENT = "  "

_POD_BEGIN_CODE = re.compile(r"^\s*=begin\s+code\b")
_POD_END_CODE = re.compile(r"^\s*=end\s+code\b")
_MD_OPEN_FENCE = re.compile(r"^ {0,3}(?:(`{3,})[^`]*|(~{3,}).*)$")
_MD_CLOSE_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")


class BlockState(str, Enum):
    OUTSIDE_CODE = "outside_code"
    INSIDE_CODE = "inside_code"


@dataclass
class ScanState:
    line_no: int = 0
    block: BlockState = BlockState.OUTSIDE_CODE
    carried: str = ""
    fence: str = ""
    findings: list[Finding] = field(default_factory=list)

    @property
    def in_code(self) -> bool:
        return self.block is BlockState.INSIDE_CODE


def _open_fence(line: str) -> str:
    m = _MD_OPEN_FENCE.match(line)
    if m is None:
        return ""
    return m.group(1) or m.group(2)


def _closes_fence(line: str, fence: str) -> bool:
    m = _MD_CLOSE_FENCE.match(line)
    # A closing fence uses the opener's character and is at least as long.
    return m is not None and m.group(1)[0] == fence[0] and len(m.group(1)) >= len(fence)


def is_directive(line: str, dialect: Dialect) -> bool:
    return dialect is Dialect.MARKED and line.startswith(DIRECTIVE_MARKER)


def advance_block(state: ScanState, line: str, dialect: Dialect) -> None:
    if dialect is Dialect.MARKED:
        if not state.in_code:
            if _POD_BEGIN_CODE.match(line):
                state.block = BlockState.INSIDE_CODE
        elif _POD_END_CODE.match(line):
            state.block = BlockState.OUTSIDE_CODE
        return
    if not state.in_code:
        state.fence = _open_fence(line)
        if state.fence:
            state.block = BlockState.INSIDE_CODE
    elif _closes_fence(line, state.fence):
        state.block = BlockState.OUTSIDE_CODE
        state.fence = ""


def process_line(
    state: ScanState,
    line: str,
    dialect: Dialect,
    allowed: frozenset[str] = DEFAULT_ALLOWED,
) -> None:
    state.line_no += 1
    if dialect is Dialect.MARKED and line.startswith(CONTINUATION_INDENT):
        return
    directive = is_directive(line, dialect)
    advance_block(state, line, dialect)
    composed = f"{state.carried} {line}" if state.carried else line
    state.carried = ""
    if state.in_code:
        return
    for word in find_duplicates(composed):
        if not is_allowed(word, allowed):
            state.findings.append(Finding(word, state.line_no))
    if not directive:
        state.carried = trailing_word(line)
