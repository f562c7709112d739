from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: str
    stderr: str


def run_command(cmd: list[str], cwd: Path) -> CommandResult:
    try:
        proc = subprocess.run(cmd, cwd=cwd, text=True, encoding="utf-8", capture_output=True, check=False)
    except FileNotFoundError as exc:
        return CommandResult(code=127, stdout="", stderr=str(exc))
    return CommandResult(code=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
