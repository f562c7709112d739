from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..contracts import validate
from ..errors import config_error
from ..exit_codes import ERR_CONFIG
from ..scanner.allowlist import DEFAULT_ALLOWED, build_allowed

CONFIG_FILENAME = ".dupwords.yaml"


@dataclass(frozen=True)
class ScanConfig:
    allowed: frozenset[str] = DEFAULT_ALLOWED
    excludes: tuple[str, ...] = ()
    source: Path | None = None


def _read_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as exc:
        raise config_error(f"unable to read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise config_error(f"invalid YAML in config {path}: {exc}") from exc


def load_config(repo_root: Path, explicit: str | None = None) -> ScanConfig:
    if explicit:
        path = Path(explicit).resolve()
        if not path.is_file():
            raise config_error(f"config file not found: {explicit}")
    else:
        path = repo_root / CONFIG_FILENAME
        if not path.is_file():
            return ScanConfig()
    data = _read_yaml(path)
    if data is None:
        data = {}
    validate("dupwords.config.v1", data, code=ERR_CONFIG)
    return ScanConfig(
        allowed=build_allowed(data.get("allow", ())),
        excludes=tuple(data.get("exclude", ())),
        source=path,
    )
