"""
Configuration constants and loading utilities for task_scanner.
"""

from __future__ import annotations

import codecs
import copy
import logging
from pathlib import Path
from typing import Any

import yaml


logger = logging.getLogger(__name__)


DEFAULT_EXCLUDE = [
    "node_modules",
    "__pycache__",
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "dist",
    "build",
    ".pytest_cache",
    ".mypy_cache",
    "*.pyc",
    "*.pyo",
    "*.class",
    "*.jar",
    "*.png",
    "*.jpg",
    "*.gif",
    "*.zip",
    ".DS_Store",
    "*.egg-info",
]


DEFAULT_CONFIG: dict[str, Any] = {
    # Marker tags per priority (comma-separated)
    "tasks": {
        "high": "FIXME",
        "normal": "TODO",
        "low": "",
    },

    # Files to scan
    "files": {
        "patterns": ["**/*"],
        "encoding": "utf-8",
    },

    # Exclusion patterns (applied in addition to DEFAULT_EXCLUDE and CLI exclusions)
    "exclude": {
        "directories": [],  # e.g., ["vendor", "third-party"]
        "extensions": [],   # e.g., [".md", ".log"]
        "patterns": [],     # e.g., ["*.min.js"]
    },
}


def _normalize_tags(value: Any) -> str | None:
    """Accept tag lists written as YAML sequences as well as strings."""
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value if item is not None)
    if value is None or isinstance(value, str):
        return value
    return str(value)


def load_config(config_path: Path) -> dict[str, Any]:
    """
    Load configuration from YAML file, merged with defaults.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Configuration dictionary with user values merged over defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file is not valid YAML, not a mapping, or names
            an unknown encoding.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            user_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(user_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    # Merge each section over the defaults
    config = copy.deepcopy(DEFAULT_CONFIG)
    for key, value in user_config.items():
        if isinstance(value, dict) and key in config and isinstance(config[key], dict):
            config[key] = {**config[key], **value}
        elif key in config and isinstance(config[key], dict) and value is not None:
            raise ValueError(f"Section '{key}' in {config_path} must be a mapping")
        elif value is not None:
            config[key] = value

    for tier in ("high", "normal", "low"):
        config["tasks"][tier] = _normalize_tags(config["tasks"].get(tier))

    encoding = config["files"].get("encoding") or "utf-8"
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError):
        raise ValueError(f"Unknown encoding '{encoding}' in {config_path}") from None
    config["files"]["encoding"] = encoding

    logger.debug("Loaded config %s: tasks=%s", config_path, config["tasks"])
    return config


def get_exclude_patterns(config: dict[str, Any], extra: list[str] | None = None) -> list[str]:
    """
    Combine the default exclusions with the config and CLI ones.

    Args:
        config: Configuration dictionary.
        extra: Additional patterns (e.g., from --exclude).

    Returns:
        Patterns usable with utils.should_exclude.
    """
    exclude = list(DEFAULT_EXCLUDE)
    section = config.get("exclude", {})
    exclude.extend(section.get("directories") or [])
    for ext in section.get("extensions") or []:
        exclude.append(ext if ext.startswith("*") else f"*{ext}")
    exclude.extend(section.get("patterns") or [])
    if extra:
        exclude.extend(extra)
    return exclude


def get_config_template() -> str:
    """Generate a documented YAML starter config."""
    return '''# =============================================================================
# Task Scanner Configuration
# =============================================================================
# Use with: task-scanner . --config task-scanner.yaml
#
# =============================================================================
# TASK TAGS
# =============================================================================
# Comma-separated marker identifiers for each priority. Tags are
# case-sensitive and must appear as whole words ("TODO" does not match
# "TODOLIST").
#
# A tier that is empty or null finds nothing. The same tag may appear in
# several tiers; a matching line then counts once per tier.
# =============================================================================
tasks:
  high: "FIXME"
  normal: "TODO"
  low: ""
  # low: "XXX, NOTE"

# =============================================================================
# FILES
# =============================================================================
# Glob patterns (relative to the scanned directory) and the encoding used
# to read them. Undecodable bytes are skipped.
# =============================================================================
files:
  patterns:
    - "**/*"
    # - "**/*.py"
    # - "**/*.java"
  encoding: utf-8

# =============================================================================
# EXCLUSIONS
# =============================================================================
# Applied IN ADDITION to the built-in list (.git, node_modules, build, ...)
# and to the CLI --exclude flag.
# =============================================================================
exclude:
  # Directories to skip
  directories:
    # - vendor
    # - docs

  # File extensions to skip
  extensions:
    # - .md
    # - .log

  # Suffix patterns to skip
  patterns:
    # - "*.min.js"
'''
