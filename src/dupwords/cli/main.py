from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..config import load_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..core.serialize import dumps_json
from ..errors import ScriptError
from ..exit_codes import ERR_FINDINGS, ERR_INTERNAL, ERR_USAGE, OK
from ..reporting import build_payload, render_error, render_tap, write_junit
from ..scanner.discovery import discover, select_doc_files
from ..scanner.model import DocFile, FileResult
from ..scanner.scan import scan_file


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dupwords", description="flag accidentally repeated words in documentation")
    p.add_argument("--version", action="version", version=f"dupwords {__version__}")
    p.add_argument("paths", nargs="*", help="files to check instead of discovering them under --root")
    p.add_argument("--root", help="repository root used for discovery (default: enclosing git work tree)")
    p.add_argument("--config", help="YAML config file (default: <root>/.dupwords.yaml)")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--junitxml", help="also write a JUnit XML report to this path")
    p.add_argument("--run-id", help="run identifier stamped on logs and reports")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="log every scanned file")
    vg.add_argument("--quiet", action="store_true", help="only log errors")
    return p


def _display_path(ctx: RunContext, path: Path) -> str:
    try:
        return path.resolve().relative_to(ctx.repo_root).as_posix()
    except ValueError:
        return path.as_posix()


def _collect(ctx: RunContext, paths: list[str], excludes: tuple[str, ...]) -> list[DocFile]:
    if paths:
        return select_doc_files(paths)
    return discover(ctx.repo_root, excludes)


def run_scan(ctx: RunContext, docs: list[DocFile], allowed: frozenset[str]) -> list[FileResult]:
    results: list[FileResult] = []
    for doc in docs:
        display = _display_path(ctx, doc.path)
        log_event(ctx, "debug", "scan", "file", path=display, dialect=doc.dialect.value)
        results.append(scan_file(doc, allowed, display=display))
    return results


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    if ns.json and ns.format == "text":
        print(render_error(as_json=False, message="conflicting output flags: use either --format text or --json", code=ERR_USAGE), file=sys.stderr)
        return ERR_USAGE
    fmt = "json" if ns.json else (ns.format or "text")
    ctx = RunContext.from_args(ns.run_id, ns.root, fmt, ns.verbose, ns.quiet, ns.log_json)
    as_json = ctx.output_format == "json"
    try:
        config = load_config(ctx.repo_root, ns.config)
        if config.source is not None:
            log_event(ctx, "info", "config", "loaded", path=config.source.as_posix(), allow=len(config.allowed))
        docs = _collect(ctx, ns.paths, config.excludes)
        log_event(ctx, "info", "scan", "start", root=ctx.repo_root.as_posix(), files=len(docs))
        results = run_scan(ctx, docs, config.allowed)
        failed = sum(1 for result in results if not result.passed)
        log_event(ctx, "info", "scan", "done", files=len(results), failed=failed)
        if as_json:
            print(dumps_json(build_payload(ctx, results), pretty=True))
        else:
            print(render_tap(results))
        if ns.junitxml:
            write_junit(Path(ns.junitxml), results)
        return OK if failed == 0 else ERR_FINDINGS
    except ScriptError as exc:
        log_event(ctx, "error", "cli", exc.kind, message=str(exc))
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        log_event(ctx, "error", "cli", "internal_error", message=str(exc))
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
