from __future__ import annotations

from pathlib import Path
from typing import Sequence
from xml.etree.ElementTree import Element, SubElement, tostring

from ..errors import io_error
from ..scanner.model import FileResult


def write_junit(path: Path, results: Sequence[FileResult]) -> None:
    failed = sum(1 for result in results if not result.passed)
    suite = Element("testsuite", name="dupwords", tests=str(len(results)), failures=str(failed))
    for result in results:
        case = SubElement(suite, "testcase", classname=f"dupwords.{result.dialect.value}", name=result.path)
        if not result.passed:
            count = len(result.findings)
            failure = SubElement(case, "failure", message=f"{count} duplicated word{'s' if count != 1 else ''}")
            failure.text = result.message
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tostring(suite, encoding="unicode") + "\n", encoding="utf-8")
    except OSError as exc:
        raise io_error("write", path, exc) from exc
