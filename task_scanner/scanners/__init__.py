"""
Scanners for task_scanner.

TaskScanner finds tasks in a single stream, WorkspaceScanner applies it to
the files of a directory tree.
"""

from task_scanner.scanners.tasks import TaskScanner
from task_scanner.scanners.workspace import WorkspaceScanner

__all__ = [
    "TaskScanner",
    "WorkspaceScanner",
]
