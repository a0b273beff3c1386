# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def file_with_tasks():
    """Binary stream of a file with one TODO and one FIXME."""
    with open(FIXTURES / "file-with-tasks.txt", "rb") as f:
        yield f


@pytest.fixture()
def file_without_tasks():
    with open(FIXTURES / "file-without-tasks.txt", "rb") as f:
        yield f


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """
    Small project tree:

    - src/app.py: one FIXME, one TODO
    - src/util.py: one TODO
    - docs/notes.md: no tasks
    - build/generated.py: one FIXME (excluded by default)
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.py").write_text(
        "def main():\n"
        "    # FIXME: crashes on empty input\n"
        "    # TODO - add logging\n"
        "    return 0\n",
        encoding="utf-8",
    )
    (src / "util.py").write_text(
        "# TODO handle unicode\n"
        "VALUE = 1\n",
        encoding="utf-8",
    )
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "notes.md").write_text("Nothing to do here.\n", encoding="utf-8")
    build = tmp_path / "build"
    build.mkdir()
    (build / "generated.py").write_text("# FIXME generated\n", encoding="utf-8")
    return tmp_path
