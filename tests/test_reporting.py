from __future__ import annotations

import json
from pathlib import Path
from xml.etree.ElementTree import fromstring

import pytest

from dupwords.core.context import RunContext
from dupwords.errors import ScriptError
from dupwords.exit_codes import ERR_VALIDATION
from dupwords.reporting import build_payload, render_error, render_tap, write_junit
from dupwords.scanner.model import Dialect, FileResult, Finding

PASSING = FileResult("README.md", Dialect.PLAIN)
FAILING = FileResult("doc/intro.pod6", Dialect.MARKED, (Finding("the", 3), Finding("Word", 10)))


def _ctx(tmp_path: Path) -> RunContext:
    return RunContext(
        run_id="test-run",
        repo_root=tmp_path,
        output_format="json",
        verbose=False,
        quiet=True,
        log_json=False,
    )


def test_failure_message_lists_every_finding_in_order() -> None:
    assert FAILING.message == "«the» on line 3\n«Word» on line 10"
    assert PASSING.message == ""


def test_render_tap() -> None:
    assert render_tap([PASSING, FAILING]) == "\n".join(
        [
            "1..2",
            "ok 1 - README.md",
            "not ok 2 - doc/intro.pod6",
            "# «the» on line 3",
            "# «Word» on line 10",
        ]
    )


def test_render_tap_for_empty_run() -> None:
    assert render_tap([]) == "1..0"


def test_build_payload_counts_and_validates(tmp_path: Path) -> None:
    payload = build_payload(_ctx(tmp_path), [PASSING, FAILING])
    assert payload["status"] == "fail"
    assert payload["total_count"] == 2
    assert payload["failed_count"] == 1
    assert payload["files"][1] == {
        "path": "doc/intro.pod6",
        "dialect": "marked",
        "status": "fail",
        "findings": [{"word": "the", "line": 3}, {"word": "Word", "line": 10}],
    }


def test_build_payload_for_empty_run(tmp_path: Path) -> None:
    payload = build_payload(_ctx(tmp_path), [])
    assert payload["status"] == "pass"
    assert payload["files"] == []


def test_build_payload_rejects_invalid_rows(tmp_path: Path) -> None:
    bad = FileResult("x.md", Dialect.PLAIN, (Finding("", 0),))
    with pytest.raises(ScriptError) as info:
        build_payload(_ctx(tmp_path), [bad])
    assert info.value.code == ERR_VALIDATION


def test_write_junit(tmp_path: Path) -> None:
    out = tmp_path / "reports/dupwords.xml"
    write_junit(out, [PASSING, FAILING])
    suite = fromstring(out.read_text(encoding="utf-8"))
    assert suite.get("tests") == "2"
    assert suite.get("failures") == "1"
    cases = suite.findall("testcase")
    assert [c.get("name") for c in cases] == ["README.md", "doc/intro.pod6"]
    assert cases[0].find("failure") is None
    failure = cases[1].find("failure")
    assert failure is not None
    assert failure.get("message") == "2 duplicated words"
    assert failure.text == FAILING.message


def test_render_error_envelopes() -> None:
    assert render_error(as_json=False, message="boom", code=11) == "dupwords: error: boom"
    payload = json.loads(render_error(as_json=True, message="boom", code=11, kind="io_error"))
    assert payload["status"] == "error"
    assert payload["errors"] == [{"code": 11, "kind": "io_error", "message": "boom"}]
