"""
Annotation model for task_scanner.

A Task is one located marker occurrence (priority, message, line, file).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class Priority(Enum):
    """Severity of a task, HIGH being the most severe."""

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @classmethod
    def ordered(cls) -> list[Priority]:
        """Priorities from most to least severe."""
        return [cls.HIGH, cls.NORMAL, cls.LOW]

    @classmethod
    def from_string(cls, name: str) -> Priority:
        """
        Resolve a priority by name, ignoring case.

        Raises:
            ValueError: If the name is not a known priority.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown priority '{name}' (expected one of: high, normal, low)"
            ) from None

    def is_at_least(self, other: Priority) -> bool:
        order = Priority.ordered()
        return order.index(self) <= order.index(other)


@dataclass(frozen=True)
class Task:
    """A single open task found in a file."""

    priority: Priority
    message: str
    line: int
    tag: str = ""
    filename: str | None = None

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"Line numbers start at 1, got {self.line}")

    def with_filename(self, filename: str) -> Task:
        return replace(self, filename=filename)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["priority"] = self.priority.value
        return data
