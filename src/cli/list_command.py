"""List command wiring for barotool CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from store.sample_listing import list_sample_file


def add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="Lists the samples in a file.")


def run_list_command(file_path: Path) -> int:
    """Print every sample in the file, one per line."""
    for line in list_sample_file(file_path):
        print(line)
    return 0
