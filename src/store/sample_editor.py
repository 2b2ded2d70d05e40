"""Sample editing workflow.

This module validates edit arguments, rewrites every eligible sample
at a location, and persists the file only when something changed.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import re

from core.errors import BaroNotFoundError, BaroUsageError
from core.logging_config import get_logger
from core.types import EditRequest, EditResult, ImmersiveData, Sample, SampleData, SampleKey
from store.sample_file import read_sample_file, write_sample_file

_LOGGER = get_logger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def build_edit_request(
    dimension: str,
    x: str,
    z: str,
    mineral: str | None = None,
    liquid: str | None = None,
    ore: str | None = None,
) -> EditRequest:
    """Validate raw edit arguments into a typed request.

    Args:
        dimension: Dimension id text.
        x: Chunk X coordinate text.
        z: Chunk Z coordinate text.
        mineral: Optional Immersive mineral text.
        liquid: Optional Immersive liquid text.
        ore: Optional TerraFirmaCraft or Geolosys ore name.

    Returns:
        Validated edit request.

    Raises:
        BaroUsageError: If a coordinate is not a 32-bit integer, or the
            update fields are missing or conflicting.
    """
    key = SampleKey(
        dimension=parse_int32(dimension, "Dimension ID must be an integer"),
        x=parse_int32(x, "X coordinate must be an integer"),
        z=parse_int32(z, "Z coordinate must be an integer"),
    )
    immersive_requested = mineral is not None or liquid is not None
    if ore is not None and immersive_requested:
        raise BaroUsageError("--ore cannot be combined with --mineral or --liquid")
    if ore is None and not immersive_requested:
        raise BaroUsageError("one of --mineral, --liquid, or --ore is required")
    return EditRequest(key=key, mineral=mineral, liquid=liquid, ore=ore)


def parse_int32(text: str, message: str) -> int:
    """Parse signed 32-bit integer text.

    Raises:
        BaroUsageError: With ``message`` if the text is not a valid i32.
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise BaroUsageError(message)
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise BaroUsageError(message)
    return value


def apply_edit(samples: list[Sample], request: EditRequest) -> int:
    """Rewrite every eligible sample at the request key in place.

    Records keep their list position; variants that do not accept the
    requested fields are left untouched.

    Args:
        samples: Loaded samples, mutated in place.
        request: Validated edit request.

    Returns:
        Number of samples modified.
    """
    modified_count = 0
    for index, sample in enumerate(samples):
        if sample.key != request.key:
            continue
        updated_data = _updated_data(sample.data, request)
        if updated_data is None:
            continue
        samples[index] = replace(sample, data=updated_data)
        modified_count += 1
    return modified_count


def edit_sample_file(path: Path, request: EditRequest) -> EditResult:
    """Apply an edit to a sample file.

    Args:
        path: Sample file path.
        request: Validated edit request.

    Returns:
        Summary of the persisted edit.

    Raises:
        BaroNotFoundError: If no eligible sample exists at the key.
        BaroIOError: If the file cannot be read or written.
        BaroFormatError: If the file is malformed or cannot be re-encoded.
    """
    samples = read_sample_file(path)
    modified_count = apply_edit(samples, request)
    if modified_count == 0:
        raise BaroNotFoundError(not_found_message(request))
    write_sample_file(path, samples)
    _LOGGER.info(
        "sample_edit_applied",
        path=str(path),
        dimension=request.key.dimension,
        x=request.key.x,
        z=request.key.z,
        modified_count=modified_count,
    )
    return EditResult(key=request.key, modified_count=modified_count, total_count=len(samples))


def not_found_message(request: EditRequest) -> str:
    """Render the miss message for the variant family the request targets."""
    key = request.key
    family = "TFC or Geolosys" if request.targets_ore else "Immersive"
    return f"No {family} sample found in dimension {key.dimension} at X={key.x}, Z={key.z}"


def _updated_data(data: SampleData, request: EditRequest) -> SampleData | None:
    """Return the payload with requested fields applied, or None if ineligible."""
    if isinstance(data, ImmersiveData):
        if request.mineral is None and request.liquid is None:
            return None
        return replace(
            data,
            mineral=data.mineral if request.mineral is None else request.mineral,
            liquid=data.liquid if request.liquid is None else request.liquid,
        )
    if request.ore is None:
        return None
    return replace(data, ore=request.ore)
