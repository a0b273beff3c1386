"""
Entry point for running task_scanner as a module.

Usage: python -m task_scanner [args]
"""

import sys

from task_scanner.cli import main

if __name__ == "__main__":
    sys.exit(main())
