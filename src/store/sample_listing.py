"""Text rendering for sample listings."""

from __future__ import annotations

from pathlib import Path

from core.types import GeolosysData, ImmersiveData, Sample, SampleData
from store.sample_file import read_sample_file


def render_sample(sample: Sample) -> str:
    """Render one sample as a single listing line."""
    return (
        f"Dimension {sample.dimension}, X={sample.x}, Z={sample.z}: "
        f"{render_sample_data(sample.data)}"
    )


def render_sample_data(data: SampleData) -> str:
    """Render a sample payload with its mod label."""
    if isinstance(data, ImmersiveData):
        return f"Immersive {data.mineral}, {data.liquid}, timestamp {data.timestamp}"
    if isinstance(data, GeolosysData):
        return f"Geolosys {data.ore}"
    return f"TFC {data.ore}"


def list_sample_file(path: Path) -> list[str]:
    """Read a sample file and render every sample in file order.

    Args:
        path: Sample file path.

    Returns:
        One rendered line per sample.

    Raises:
        BaroIOError: If the file cannot be read.
        BaroFormatError: If the file contents are malformed.
    """
    return [render_sample(sample) for sample in read_sample_file(path)]
