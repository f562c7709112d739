from __future__ import annotations

from .junit import write_junit
from .payload import build_payload, render_error
from .tap import render_tap

__all__ = ["build_payload", "render_error", "render_tap", "write_junit"]
