"""
Task Scanner - find open tasks (FIXME, TODO, ...) in source files.

Markers are grouped into three priorities and counted per priority and
per file.
"""

__version__ = "1.0.0"

from task_scanner.model import Priority, Task
from task_scanner.tags import TagSet
from task_scanner.container import AnnotationContainer
from task_scanner.scanners import TaskScanner, WorkspaceScanner
from task_scanner.config import DEFAULT_CONFIG, DEFAULT_EXCLUDE

__all__ = [
    "AnnotationContainer",
    "DEFAULT_CONFIG",
    "DEFAULT_EXCLUDE",
    "Priority",
    "TagSet",
    "Task",
    "TaskScanner",
    "WorkspaceScanner",
    "__version__",
]
