"""Edit command wiring for barotool CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from core.errors import BaroNotFoundError, BaroUsageError
from store.sample_editor import build_edit_request, edit_sample_file


def add_edit_command(subparsers: Any) -> None:
    """Register edit subcommand."""
    parser = subparsers.add_parser("edit", help="Modifies one sample in a file.")
    parser.add_argument("dimension", help="The dimension ID containing the sample")
    parser.add_argument("x", help="The X coordinate of the sample to modify")
    parser.add_argument("z", help="The Z coordinate of the sample to modify")
    parser.add_argument(
        "-m",
        "--mineral",
        help="The Immersive mineral deposit text to change the sample to",
    )
    parser.add_argument(
        "-l",
        "--liquid",
        help="The Immersive liquid reservoir text to change the sample to",
    )
    parser.add_argument(
        "-o",
        "--ore",
        help="The TerraFirmaCraft or Geolosys ore name to change the sample to",
    )


def run_edit_command(file_path: Path, args: argparse.Namespace) -> int:
    """Validate edit arguments, then rewrite matching samples."""
    try:
        request = build_edit_request(
            args.dimension,
            args.x,
            args.z,
            mineral=args.mineral,
            liquid=args.liquid,
            ore=args.ore,
        )
    except BaroUsageError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        edit_sample_file(file_path, request)
    except BaroNotFoundError as error:
        print(error, file=sys.stderr)
        return 1
    return 0
