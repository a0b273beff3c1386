# tests/test_workspace.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_scanner.model import Priority
from task_scanner.scanners.tasks import TaskScanner
from task_scanner.scanners.workspace import WorkspaceScanner


def test_scan_directory(workspace: Path) -> None:
    scanner = WorkspaceScanner()

    container = scanner.scan(workspace)

    assert container.to_dict() == {"total": 3, "high": 1, "normal": 2, "low": 0}
    assert list(container.files()) == ["src/app.py", "src/util.py"]
    assert scanner.files_scanned == 3
    assert scanner.files_skipped == []


def test_tasks_are_bound_to_relative_filenames(workspace: Path) -> None:
    container = WorkspaceScanner().scan(workspace)

    first = container.get_annotations()[0]
    assert first.filename == "src/app.py"
    assert first.line == 2
    assert first.message == "crashes on empty input"
    assert first.priority is Priority.HIGH


def test_default_exclusions_skip_build_dir(workspace: Path) -> None:
    container = WorkspaceScanner().scan(workspace)

    assert "build/generated.py" not in container.files()


def test_empty_exclusions_scan_everything(workspace: Path) -> None:
    container = WorkspaceScanner(exclude=[]).scan(workspace)

    assert container.get_number_of_annotations(Priority.HIGH) == 2
    assert "build/generated.py" in container.files()


def test_patterns_restrict_files(workspace: Path) -> None:
    scanner = WorkspaceScanner(patterns=["src/util.py", "docs/*.md"])

    container = scanner.scan(workspace)

    assert scanner.files_scanned == 2
    assert list(container.files()) == ["src/util.py"]


def test_overlapping_patterns_scan_each_file_once(workspace: Path) -> None:
    scanner = WorkspaceScanner(patterns=["**/*.py", "src/*"])

    container = scanner.scan(workspace)

    assert scanner.files_scanned == 2
    assert len(container) == 3


def test_custom_task_scanner(workspace: Path) -> None:
    scanner = WorkspaceScanner(task_scanner=TaskScanner(None, None, "TODO"))

    container = scanner.scan(workspace)

    assert container.to_dict() == {"total": 2, "high": 0, "normal": 0, "low": 2}


def test_scan_single_file(workspace: Path) -> None:
    container = WorkspaceScanner().scan(workspace / "src" / "util.py")

    assert list(container.files()) == ["util.py"]
    assert container.get_number_of_annotations(Priority.NORMAL) == 1


def test_unreadable_file_is_skipped(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    scanner = WorkspaceScanner()
    real_scan = scanner.task_scanner.scan

    def failing_scan(stream):
        if str(stream.name).endswith("app.py"):
            raise OSError("permission denied")
        return real_scan(stream)

    monkeypatch.setattr(scanner.task_scanner, "scan", failing_scan)

    container = scanner.scan(workspace)

    assert scanner.files_skipped == ["src/app.py"]
    assert scanner.files_scanned == 2
    assert container.to_dict() == {"total": 1, "high": 0, "normal": 1, "low": 0}


@pytest.mark.parametrize("newline", [b"\r\n", b"\r"])
def test_files_with_crlf_and_cr_line_endings(tmp_path: Path, newline: bytes) -> None:
    lines = [b"int x;", b"// TODO: first", b"// FIXME second", b"}"]
    (tmp_path / "legacy.c").write_bytes(newline.join(lines) + newline)

    container = WorkspaceScanner().scan(tmp_path)

    assert [(t.line, t.priority, t.message) for t in container] == [
        (2, Priority.NORMAL, "first"),
        (3, Priority.HIGH, "second"),
    ]


@pytest.mark.parametrize("encoding", ["latin-1", "utf-16"])
def test_files_in_configured_encoding(tmp_path: Path, encoding: str) -> None:
    (tmp_path / "notes.txt").write_text(
        "entête\n# TODO réviser\n# FIXME déjà cassé\n", encoding=encoding
    )
    config = {"tasks": {"high": "FIXME", "normal": "TODO"}, "files": {"encoding": encoding}}
    scanner = WorkspaceScanner(task_scanner=TaskScanner.from_config(config))

    container = scanner.scan(tmp_path)

    assert [(t.line, t.message) for t in container] == [(2, "réviser"), (3, "déjà cassé")]
