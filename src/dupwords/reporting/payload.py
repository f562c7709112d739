from __future__ import annotations

from typing import Sequence

from ..contracts import validate
from ..core.context import RunContext
from ..core.serialize import dumps_json
from ..scanner.model import FileResult

REPORT_SCHEMA = "dupwords.report.v1"


def build_payload(ctx: RunContext, results: Sequence[FileResult]) -> dict[str, object]:
    failed = sum(1 for result in results if not result.passed)
    payload: dict[str, object] = {
        "schema_name": REPORT_SCHEMA,
        "schema_version": 1,
        "tool": "dupwords",
        "run_id": ctx.run_id,
        "status": "pass" if failed == 0 else "fail",
        "total_count": len(results),
        "failed_count": failed,
        "files": [
            {
                "path": result.path,
                "dialect": result.dialect.value,
                "status": result.status,
                "findings": [{"word": f.word, "line": f.line} for f in result.findings],
            }
            for result in results
        ],
    }
    validate(REPORT_SCHEMA, payload)
    return payload


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "dupwords.error.v1",
                "schema_version": 1,
                "tool": "dupwords",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
        )
    return f"dupwords: error: {message}"
