from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path, PurePath
from typing import Iterable

from ..core.process import run_command
from ..core.scan import iter_files
from .model import Dialect, DocFile

DIALECT_BY_SUFFIX: dict[str, Dialect] = {
    ".pod6": Dialect.MARKED,
    ".md": Dialect.PLAIN,
}


def classify(path: str | PurePath) -> Dialect | None:
    return DIALECT_BY_SUFFIX.get(PurePath(path).suffix)


def select_doc_files(paths: Iterable[str | Path]) -> list[DocFile]:
    out: list[DocFile] = []
    for raw in paths:
        dialect = classify(raw)
        if dialect is not None:
            out.append(DocFile(Path(raw), dialect))
    return out


def _git_ls_files(root: Path) -> list[str] | None:
    probe = run_command(["git", "rev-parse", "--is-inside-work-tree"], root)
    if probe.code != 0 or probe.stdout.strip() != "true":
        return None
    listing = run_command(["git", "ls-files", "-z"], root)
    if listing.code != 0:
        return None
    return [entry for entry in listing.stdout.split("\0") if entry]


def list_repo_files(root: Path) -> list[str]:
    tracked = _git_ls_files(root)
    if tracked is not None:
        # ls-files still lists tracked paths deleted from the work tree.
        return [rel for rel in tracked if (root / rel).is_file()]
    return [path.relative_to(root).as_posix() for path in iter_files(root)]


def _excluded(rel: str, excludes: Iterable[str]) -> bool:
    return any(fnmatch(rel, pattern) for pattern in excludes)


def discover(root: Path, excludes: Iterable[str] = ()) -> list[DocFile]:
    patterns = tuple(excludes)
    rels = [rel for rel in list_repo_files(root) if not _excluded(rel, patterns)]
    return [DocFile(root / doc.path, doc.dialect) for doc in select_doc_files(rels)]
