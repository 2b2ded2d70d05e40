"""Unit tests for edit command wiring."""

from __future__ import annotations

import argparse

from cli.edit_command import add_edit_command, run_edit_command
from store.sample_codec import encode_sample_list
from store.sample_file import read_sample_file
from tests.sample_fixtures import geolosys_sample, immersive_sample, write_raw_file


def _parse(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    add_edit_command(parser.add_subparsers(dest="command", required=True))
    return parser.parse_args(argv)


def test_edit_command_short_flags_map_to_fields() -> None:
    """Short flags should populate mineral, liquid, and ore."""
    args = _parse(["edit", "0", "1", "2", "-m", "Iron", "-l", "Oil"])

    assert (args.mineral, args.liquid, args.ore) == ("Iron", "Oil", None)


def test_run_edit_command_updates_shared_key_ore_only(tmp_path) -> None:
    """Ore edits should leave the Immersive sample at the same key alone."""
    samples = [
        immersive_sample(dimension=1, x=10, z=-5),
        geolosys_sample(dimension=1, x=10, z=-5, ore="Galena"),
    ]
    path = write_raw_file(tmp_path / "world.samples2", encode_sample_list(samples))

    exit_code = run_edit_command(path, _parse(["edit", "1", "10", "-5", "--ore", "Hematite"]))

    assert exit_code == 0
    assert read_sample_file(path) == [samples[0], geolosys_sample(dimension=1, x=10, z=-5)]
