"""
Utility functions for task_scanner.
"""

from __future__ import annotations

import os
from pathlib import Path


def should_exclude(path: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if path should be excluded based on patterns.

    Args:
        path: Path to check.
        exclude_patterns: List of patterns. Patterns starting with '*'
            match suffixes, others match directory names.

    Returns:
        True if the path should be excluded.
    """
    path_str = str(path)
    for pattern in exclude_patterns:
        if pattern.startswith("*"):
            # Suffix match (e.g., "*.pyc")
            if path_str.endswith(pattern[1:]):
                return True
        elif pattern in path_str.split(os.sep):
            # Directory name match
            return True
    return False


def relative_name(filepath: Path, root: Path) -> str:
    """
    Name of a file relative to the scan root, with forward slashes.

    Args:
        filepath: File inside root.
        root: Scan root (a directory, or the file itself).

    Returns:
        Relative path, or the file name when root is the file.
    """
    if filepath == root:
        return filepath.name
    return filepath.relative_to(root).as_posix()
