"""User-facing failures carried up to the CLI as exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exit_codes import ERR_CONFIG, ERR_IO


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


def io_error(action: str, path: Path, exc: BaseException) -> ScriptError:
    return ScriptError(f"unable to {action} {path}: {exc}", ERR_IO, kind="io_error")


def config_error(message: str) -> ScriptError:
    return ScriptError(message, ERR_CONFIG, kind="config_error")
