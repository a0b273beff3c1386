"""
Task marker scanner for task_scanner.

Scans text line by line for FIXME/TODO style markers. Each priority tier
has its own tag set and is matched independently, so one line can yield a
task for every tier whose tags it contains.
"""

from __future__ import annotations

import codecs
import io
import logging
import re
from typing import TYPE_CHECKING

from task_scanner.config import DEFAULT_CONFIG
from task_scanner.model import Priority, Task
from task_scanner.tags import TagSet

if TYPE_CHECKING:
    from typing import IO, Any, Iterable, Pattern

logger = logging.getLogger(__name__)

DEFAULT_HIGH_TAGS = "FIXME"
DEFAULT_NORMAL_TAGS = "TODO"
DEFAULT_LOW_TAGS = None

# Separator punctuation allowed between a marker and its message
_LEADING_SEPARATORS = re.compile(r"^[\s:\-]+")

_UNSET = object()


class TaskScanner:
    """Find open tasks (FIXME, TODO, ...) in a text stream."""

    def __init__(
        self,
        high: str | None | object = _UNSET,
        normal: str | None | object = _UNSET,
        low: str | None | object = _UNSET,
        encoding: str = "utf-8",
    ):
        """
        Initialize the scanner.

        With no tag arguments the defaults are used (FIXME is high, TODO
        is normal, no low tags). As soon as any tier is given explicitly,
        every tier that is None or blank is empty; it does not fall back
        to its default.

        Args:
            high: Comma-separated tags for high priority tasks.
            normal: Comma-separated tags for normal priority tasks.
            low: Comma-separated tags for low priority tasks.
            encoding: Encoding used to decode binary streams.

        Raises:
            ValueError: If the encoding is unknown.
        """
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding '{encoding}'") from None

        if high is _UNSET and normal is _UNSET and low is _UNSET:
            high, normal, low = DEFAULT_HIGH_TAGS, DEFAULT_NORMAL_TAGS, DEFAULT_LOW_TAGS

        self.tag_sets: dict[Priority, TagSet] = {
            Priority.HIGH: TagSet.parse(None if high is _UNSET else high),
            Priority.NORMAL: TagSet.parse(None if normal is _UNSET else normal),
            Priority.LOW: TagSet.parse(None if low is _UNSET else low),
        }
        self.encoding = encoding
        self._patterns: list[tuple[Priority, Pattern[str]]] = []
        for priority in Priority.ordered():
            pattern = self.tag_sets[priority].compile()
            if pattern is not None:
                self._patterns.append((priority, pattern))

        logger.debug(
            "Task tags: high=%s normal=%s low=%s",
            self.tag_sets[Priority.HIGH],
            self.tag_sets[Priority.NORMAL],
            self.tag_sets[Priority.LOW],
        )

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> TaskScanner:
        """
        Create a scanner from a loaded configuration.

        Args:
            config: Configuration dictionary (see config.DEFAULT_CONFIG).

        Returns:
            Scanner using the "tasks" tiers and the "files" encoding.
        """
        tasks = config.get("tasks", DEFAULT_CONFIG["tasks"])
        encoding = config.get("files", {}).get("encoding", "utf-8")
        return cls(
            tasks.get("high"),
            tasks.get("normal"),
            tasks.get("low"),
            encoding=encoding,
        )

    def has_tags(self) -> bool:
        """Return True if at least one tier has tags."""
        return bool(self._patterns)

    def scan(self, stream: IO[str] | IO[bytes]) -> list[Task]:
        """
        Scan a stream for tasks.

        The stream is read to the end but not closed. Binary streams are
        decoded with the scanner's encoding, skipping undecodable bytes,
        and split on universal newlines (LF, CRLF and CR).

        Args:
            stream: Open text or binary stream.

        Returns:
            Tasks in line order; on the same line high before normal
            before low.

        Raises:
            OSError: If the stream cannot be read.
        """
        if not isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
            return self.scan_lines(stream)

        text = io.TextIOWrapper(stream, encoding=self.encoding, errors="ignore")
        try:
            return self.scan_lines(text)
        finally:
            # Leave the caller's stream open
            text.detach()

    def scan_lines(self, lines: Iterable[str]) -> list[Task]:
        """
        Scan already decoded lines for tasks.

        Args:
            lines: Lines of text, with or without line terminators.

        Returns:
            Tasks in line order.
        """
        tasks: list[Task] = []
        if not self._patterns:
            return tasks

        for line_number, line in enumerate(lines, 1):
            line = line.rstrip("\r\n")
            for priority, pattern in self._patterns:
                match = pattern.search(line)
                if match:
                    tasks.append(Task(
                        priority=priority,
                        message=self._extract_message(match.group("message")),
                        line=line_number,
                        tag=match.group("tag"),
                    ))
        return tasks

    @staticmethod
    def _extract_message(rest: str) -> str:
        """Strip the separator after a marker and surrounding whitespace."""
        return _LEADING_SEPARATORS.sub("", rest).strip()

    def __repr__(self) -> str:
        return (
            f"TaskScanner(high={str(self.tag_sets[Priority.HIGH])!r}, "
            f"normal={str(self.tag_sets[Priority.NORMAL])!r}, "
            f"low={str(self.tag_sets[Priority.LOW])!r})"
        )
