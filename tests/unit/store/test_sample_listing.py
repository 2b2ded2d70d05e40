"""Unit tests for sample listing output."""

from __future__ import annotations

from store.sample_codec import encode_sample_list
from store.sample_listing import list_sample_file, render_sample
from tests.sample_fixtures import geolosys_sample, immersive_sample, tfc_sample, write_raw_file


def test_render_tfc_sample() -> None:
    """TerraFirmaCraft samples should render with the TFC label."""
    line = render_sample(tfc_sample(dimension=0, x=3, z=4, ore="Native Copper"))

    assert line == "Dimension 0, X=3, Z=4: TFC Native Copper"


def test_render_immersive_sample() -> None:
    """Immersive samples should render mineral, liquid, and timestamp."""
    sample = immersive_sample(dimension=-1, x=2, z=-3, mineral="Bauxite", liquid="Oil", timestamp=77)

    assert render_sample(sample) == "Dimension -1, X=2, Z=-3: Immersive Bauxite, Oil, timestamp 77"


def test_render_geolosys_sample() -> None:
    """Geolosys samples should render with the Geolosys label."""
    assert render_sample(geolosys_sample(ore="Galena")).endswith(": Geolosys Galena")


def test_list_sample_file_renders_in_order_without_writing(tmp_path) -> None:
    """Listing should render each sample in file order and not modify the file."""
    payload = encode_sample_list([tfc_sample(dimension=0, x=3, z=4), geolosys_sample(x=9)])
    path = write_raw_file(tmp_path / "world.samples2", payload)

    lines = list_sample_file(path)

    assert lines == [
        "Dimension 0, X=3, Z=4: TFC Native Copper",
        "Dimension 0, X=9, Z=0: Geolosys Hematite",
    ]
    assert path.read_bytes() == payload
