"""
Workspace scanner for task_scanner.

Finds the files below a directory, runs a TaskScanner over each one and
collects the tasks in an AnnotationContainer.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from task_scanner.config import DEFAULT_CONFIG, DEFAULT_EXCLUDE
from task_scanner.container import AnnotationContainer
from task_scanner.scanners.tasks import TaskScanner
from task_scanner.utils import relative_name, should_exclude

if TYPE_CHECKING:
    from typing import Iterator

logger = logging.getLogger(__name__)


class WorkspaceScanner:
    """Scan every matching file below a root for open tasks."""

    def __init__(
        self,
        task_scanner: TaskScanner | None = None,
        patterns: list[str] | None = None,
        exclude: list[str] | None = None,
    ):
        """
        Initialize the workspace scanner.

        Args:
            task_scanner: Scanner applied to each file (defaults to FIXME/TODO).
            patterns: Glob patterns relative to the root.
            exclude: Exclusion patterns (see utils.should_exclude).
        """
        self.task_scanner = task_scanner or TaskScanner()
        self.patterns = patterns or list(DEFAULT_CONFIG["files"]["patterns"])
        self.exclude = DEFAULT_EXCLUDE.copy() if exclude is None else exclude
        self.files_scanned = 0
        self.files_skipped: list[str] = []

    def scan(self, root: Path) -> AnnotationContainer:
        """
        Scan a directory (or a single file).

        Files that cannot be read are logged and skipped.

        Args:
            root: Directory or file to scan.

        Returns:
            Container with the tasks of all files, each bound to its
            file name relative to root.
        """
        self.files_scanned = 0
        self.files_skipped = []
        container = AnnotationContainer()

        for filepath in self.find_files(root):
            name = relative_name(filepath, root)
            try:
                with open(filepath, "rb") as f:
                    tasks = self.task_scanner.scan(f)
            except OSError as e:
                logger.warning("Could not scan %s for tasks: %s", filepath, e)
                self.files_skipped.append(name)
                continue

            self.files_scanned += 1
            if tasks:
                logger.debug("%s: %d task(s)", name, len(tasks))
            container.add_annotations(task.with_filename(name) for task in tasks)

        logger.info(
            "Scanned %d file(s), skipped %d, found %d task(s)",
            self.files_scanned,
            len(self.files_skipped),
            len(container),
        )
        return container

    def find_files(self, root: Path) -> Iterator[Path]:
        """
        Yield the files to scan, each once, in sorted order.

        Args:
            root: Directory or file.
        """
        if root.is_file():
            yield root
            return

        seen: set[Path] = set()
        for pattern in self.patterns:
            for filepath in sorted(root.glob(pattern)):
                if filepath in seen or not filepath.is_file():
                    continue
                if should_exclude(filepath.relative_to(root), self.exclude):
                    continue
                seen.add(filepath)
                yield filepath
