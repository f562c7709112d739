from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Dialect(str, Enum):
    MARKED = "marked"
    PLAIN = "plain"


@dataclass(frozen=True)
class DocFile:
    path: Path
    dialect: Dialect


@dataclass(frozen=True)
class Finding:
    word: str
    line: int

    def render(self) -> str:
        return f"«{self.word}» on line {self.line}"


@dataclass(frozen=True)
class FileResult:
    path: str
    dialect: Dialect
    findings: tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return not self.findings

    @property
    def status(self) -> str:
        return "pass" if self.passed else "fail"

    @property
    def message(self) -> str:
        return "\n".join(finding.render() for finding in self.findings)
