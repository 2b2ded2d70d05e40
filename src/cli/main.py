"""barotool CLI entry points.
This module exposes the edit and list commands for sample files.
It maps argparse commands onto store workflows and exit codes.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from cli.edit_command import add_edit_command, run_edit_command
from cli.list_command import add_list_command, run_list_command
from core.config import BaroConfig, parse_log_level
from core.constants import (
    EDIT_COMMAND_NAME,
    LIST_COMMAND_NAME,
    PROGRAM_NAME,
    PROGRAM_VERSION,
    SUPPORTED_COMMAND_NAMES,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import BaroError
from core.logging_config import configure_logging

_VALUE_OPTIONS = ("--log-level",)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Manipulates Minecraft Mineral Tracker data files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {PROGRAM_VERSION}",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override BAROTOOL_LOG_LEVEL for this command",
    )
    parser.add_argument("file", help="The .samples2 file to operate on")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_edit_command(subparsers)
    add_list_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the barotool CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    raw_args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(expand_command_prefix(raw_args))
    try:
        config = _build_config(args.log_level)
    except BaroError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)
    file_path = Path(args.file)
    try:
        if args.command == EDIT_COMMAND_NAME:
            return run_edit_command(file_path, args)
        if args.command == LIST_COMMAND_NAME:
            return run_list_command(file_path)
    except BaroError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def expand_command_prefix(argv: Sequence[str]) -> list[str]:
    """Replace an unambiguous subcommand prefix with the full name.

    The first positional token is the sample file; the second is the
    subcommand. Ambiguous or unknown prefixes are left for argparse to
    reject.

    Args:
        argv: Raw argument vector.

    Returns:
        Argument vector with the subcommand expanded.
    """
    expanded = list(argv)
    seen_file = False
    options_done = False
    index = 0
    while index < len(expanded):
        token = expanded[index]
        if not options_done and token == "--":
            options_done = True
            index += 1
            continue
        if not options_done and token.startswith("-") and len(token) > 1:
            index += 2 if _takes_separate_value(token) else 1
            continue
        if seen_file:
            expanded[index] = _resolve_command_name(token)
            break
        seen_file = True
        index += 1
    return expanded


def _takes_separate_value(token: str) -> bool:
    """Return whether an option token consumes the following token."""
    if "=" in token or not token.startswith("--") or len(token) < 3:
        return False
    return any(option.startswith(token) for option in _VALUE_OPTIONS)


def _resolve_command_name(token: str) -> str:
    """Expand a unique subcommand prefix, otherwise return token unchanged."""
    if token in SUPPORTED_COMMAND_NAMES:
        return token
    matches = [name for name in SUPPORTED_COMMAND_NAMES if token and name.startswith(token)]
    return matches[0] if len(matches) == 1 else token


def _build_config(log_level: str | None) -> BaroConfig:
    """Build config with optional log-level override.

    Args:
        log_level: Optional override level.

    Returns:
        Validated runtime configuration.
    """
    config = BaroConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level, "--log-level"))
    return config
