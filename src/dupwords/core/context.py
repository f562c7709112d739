from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .repo_root import resolve_root

OutputFormat = Literal["text", "json"]


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        root: str | None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        default_run = f"dupwords-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or os.environ.get("RUN_ID", default_run),
            repo_root=resolve_root(root),
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or _env_flag("DUPWORDS_LOG_JSON"),
        )
