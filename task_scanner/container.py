"""
Task aggregation for task_scanner.

Counts tasks per priority and groups them by file for reporting.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from task_scanner.model import Priority, Task

if TYPE_CHECKING:
    from typing import Any, Iterable, Iterator

logger = logging.getLogger(__name__)


class AnnotationContainer:
    """
    Multiset of tasks with per-priority counts.

    Adding the same task twice counts it twice. Not thread-safe: give each
    concurrent scan its own container.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = []
        self._by_priority: dict[Priority, list[Task]] = {
            priority: [] for priority in Priority.ordered()
        }
        if tasks is not None:
            self.add_annotations(tasks)

    def add_annotation(self, task: Task) -> None:
        self._tasks.append(task)
        self._by_priority[task.priority].append(task)

    def add_annotations(self, tasks: Iterable[Task]) -> None:
        """Append tasks to the container; nothing is deduplicated."""
        for task in tasks:
            self.add_annotation(task)

    def get_annotations(self, priority: Priority | None = None) -> list[Task]:
        """
        Get the tasks in insertion order.

        Args:
            priority: Restrict to this priority, or None for all tasks.
        """
        if priority is None:
            return list(self._tasks)
        return list(self._by_priority[priority])

    def get_number_of_annotations(self, priority: Priority | None = None) -> int:
        """
        Count tasks.

        Args:
            priority: Restrict to this priority, or None for the total.

        Returns:
            Number of tasks, 0 if there are none.
        """
        if priority is None:
            return len(self._tasks)
        return len(self._by_priority[priority])

    def has_annotations(self, priority: Priority | None = None) -> bool:
        return self.get_number_of_annotations(priority) > 0

    def files(self) -> dict[str | None, AnnotationContainer]:
        """
        Group tasks by file name.

        Returns:
            One container per file name, in order of first appearance.
            Tasks without a file name are grouped under None.
        """
        grouped: dict[str | None, AnnotationContainer] = {}
        for task in self._tasks:
            grouped.setdefault(task.filename, AnnotationContainer()).add_annotation(task)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        """Per-priority counts plus the total."""
        counts: dict[str, Any] = {"total": self.get_number_of_annotations()}
        for priority in Priority.ordered():
            counts[priority.value] = self.get_number_of_annotations(priority)
        return counts

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={v}" for k, v in self.to_dict().items())
        return f"AnnotationContainer({counts})"
