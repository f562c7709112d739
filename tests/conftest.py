from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from dupwords.scanner.discovery import _git_ls_files

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / "artifacts/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("dupwords", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("dupwords")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_ambient_log_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DUPWORDS_LOG_JSON", raising=False)


@pytest.fixture
def doc_tree(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    (root / "doc/Language").mkdir(parents=True)
    return root


@pytest.fixture
def plain_tree(doc_tree: Path) -> Path:
    """A doc tree discovered by walking the filesystem, not by git."""
    if _git_ls_files(doc_tree) is not None:
        pytest.skip("temporary directory is inside a git work tree")
    return doc_tree


@pytest.fixture
def git_tree(doc_tree: Path) -> Path:
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    subprocess.run(["git", "init", "-q"], cwd=doc_tree, check=True)
    return doc_tree
