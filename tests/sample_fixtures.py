"""Shared sample builders for tests."""

from __future__ import annotations

import struct
from pathlib import Path

from core.types import GeolosysData, ImmersiveData, Sample, TerraFirmaCraftData


def immersive_sample(
    dimension: int = 0,
    x: int = 0,
    z: int = 0,
    mineral: str = "Iron",
    liquid: str = "Oil",
    timestamp: int = 1200,
) -> Sample:
    """Build an Immersive sample with overridable fields."""
    data = ImmersiveData(mineral=mineral, liquid=liquid, timestamp=timestamp)
    return Sample(dimension=dimension, x=x, z=z, data=data)


def tfc_sample(dimension: int = 0, x: int = 0, z: int = 0, ore: str = "Native Copper") -> Sample:
    """Build a TerraFirmaCraft sample."""
    return Sample(dimension=dimension, x=x, z=z, data=TerraFirmaCraftData(ore=ore))


def geolosys_sample(dimension: int = 0, x: int = 0, z: int = 0, ore: str = "Hematite") -> Sample:
    """Build a Geolosys sample."""
    return Sample(dimension=dimension, x=x, z=z, data=GeolosysData(ore=ore))


def lstring(text: str) -> bytes:
    """Hand-encode a length-prefixed UTF-8 string."""
    raw = text.encode("utf-8")
    return struct.pack(">H", len(raw)) + raw


def record_header(discriminant: int, dimension: int, x: int, z: int) -> bytes:
    """Hand-encode a record header."""
    return struct.pack(">Iiii", discriminant, dimension, x, z)


def write_raw_file(path: Path, payload: bytes) -> Path:
    """Write raw bytes to path and return it."""
    path.write_bytes(payload)
    return path
