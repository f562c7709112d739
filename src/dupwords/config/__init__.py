from __future__ import annotations

from .loader import CONFIG_FILENAME, ScanConfig, load_config

__all__ = ["CONFIG_FILENAME", "ScanConfig", "load_config"]
