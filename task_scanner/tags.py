"""
Tag set parsing for task_scanner.

A tag set is the list of marker identifiers (e.g. "FIXME, XXX") that make
up one priority tier.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Iterator, Pattern

logger = logging.getLogger(__name__)

# A marker must not touch identifier characters on either side
_BOUNDARY_BEFORE = r"(?<!\w)"
_BOUNDARY_AFTER = r"(?!\w)"


class TagSet:
    """
    Immutable, ordered set of marker identifiers for one priority tier.

    Tags are case-sensitive and matched as whole words.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: tuple[str, ...] = ()):
        self._tags = tags

    @classmethod
    def parse(cls, raw: str | None) -> TagSet:
        """
        Parse a comma-separated tag list.

        Surrounding whitespace is trimmed, empty entries and duplicates are
        dropped. None or a blank string yields an empty set; this never
        raises.

        Args:
            raw: Tag list such as " FIXME , TODO ".

        Returns:
            The parsed tag set.
        """
        if not raw or not isinstance(raw, str):
            return cls()

        tags: list[str] = []
        for part in raw.split(","):
            tag = part.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return cls(tuple(tags))

    def compile(self) -> Pattern[str] | None:
        """
        Build the search pattern for this tier.

        Group "tag" holds the matched marker and group "message" the rest
        of the line.

        Returns:
            Compiled pattern, or None if the set is empty.
        """
        if not self._tags:
            return None
        # Longest first so overlapping tags match the full marker
        alternatives = "|".join(
            re.escape(tag) for tag in sorted(self._tags, key=len, reverse=True)
        )
        return re.compile(
            f"{_BOUNDARY_BEFORE}(?P<tag>{alternatives}){_BOUNDARY_AFTER}(?P<message>.*)$"
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return set(self._tags) == set(other._tags)

    def __hash__(self) -> int:
        return hash(frozenset(self._tags))

    def __repr__(self) -> str:
        return f"TagSet({', '.join(self._tags)!r})"

    def __str__(self) -> str:
        return ",".join(self._tags)
