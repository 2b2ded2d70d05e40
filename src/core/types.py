"""Shared typed models.

This module defines immutable data models used by the codec, editor,
lister, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ImmersiveData:
    """Immersive Engineering excavator sample payload.

    Attributes:
        mineral: Name of the mineral deposit.
        liquid: Name of the liquid reservoir.
        timestamp: Game time when the sample was taken.
    """

    mineral: str
    liquid: str
    timestamp: int


@dataclass(frozen=True)
class TerraFirmaCraftData:
    """TerraFirmaCraft ore sample payload."""

    ore: str


@dataclass(frozen=True)
class GeolosysData:
    """Geolosys ore sample payload."""

    ore: str


SampleData = Union[ImmersiveData, TerraFirmaCraftData, GeolosysData]
OreData = Union[TerraFirmaCraftData, GeolosysData]


@dataclass(frozen=True)
class SampleKey:
    """Location of a sample; not unique within a file.

    Attributes:
        dimension: Dimension id containing the deposit.
        x: Chunk X coordinate.
        z: Chunk Z coordinate.
    """

    dimension: int
    x: int
    z: int


@dataclass(frozen=True)
class Sample:
    """One persisted sample record.

    Attributes:
        dimension: Dimension id containing the deposit.
        x: Chunk X coordinate.
        z: Chunk Z coordinate.
        data: Per-mod payload.
    """

    dimension: int
    x: int
    z: int
    data: SampleData

    @property
    def key(self) -> SampleKey:
        """Return the location key of this sample."""
        return SampleKey(dimension=self.dimension, x=self.x, z=self.z)


@dataclass(frozen=True)
class EditRequest:
    """Validated field update for every sample at one key.

    Attributes:
        key: Target sample location.
        mineral: New Immersive mineral text.
        liquid: New Immersive liquid text.
        ore: New TerraFirmaCraft or Geolosys ore name.
    """

    key: SampleKey
    mineral: str | None = None
    liquid: str | None = None
    ore: str | None = None

    @property
    def targets_ore(self) -> bool:
        """Return whether this request updates ore samples."""
        return self.ore is not None


@dataclass(frozen=True)
class EditResult:
    """Outcome of a persisted edit.

    Attributes:
        key: Edited sample location.
        modified_count: Number of samples rewritten.
        total_count: Number of samples in the file.
    """

    key: SampleKey
    modified_count: int
    total_count: int
