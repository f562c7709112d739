from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_dupwords(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    env["RUN_ID"] = "pytest-run"
    env["PYTHONIOENCODING"] = "utf-8"
    env.pop("DUPWORDS_LOG_JSON", None)
    return subprocess.run(
        [sys.executable, "-m", "dupwords.cli", *args],
        cwd=(cwd or ROOT),
        env=env,
        text=True,
        encoding="utf-8",
        capture_output=True,
        check=False,
    )


def write_doc(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
