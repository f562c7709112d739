"""Command line entry point: `dupwords [PATH ...]` or `python -m dupwords.cli`."""

from __future__ import annotations

from .main import build_parser, main, run_scan

__all__ = ["build_parser", "main", "run_scan"]
