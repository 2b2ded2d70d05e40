"""Whole-file sample persistence.

This module isolates filesystem access for sample files.
Reads load the entire file; writes replace it and sync before returning.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from core.errors import BaroIOError
from core.logging_config import get_logger
from core.types import Sample
from store.sample_codec import decode_sample_list, encode_sample_list

_LOGGER = get_logger(__name__)


def read_sample_file(path: Path) -> list[Sample]:
    """Read and decode a sample file.

    Args:
        path: Sample file path.

    Returns:
        Samples in file order.

    Raises:
        BaroIOError: If the file cannot be read.
        BaroFormatError: If the file contents are malformed.
    """
    try:
        payload = path.read_bytes()
    except OSError as error:
        raise BaroIOError(f"Failed to read sample file {path}: {error.strerror or error}.") from error
    samples = decode_sample_list(payload)
    _LOGGER.info(
        "sample_file_read",
        path=str(path),
        byte_count=len(payload),
        sample_count=len(samples),
    )
    return samples


def write_sample_file(path: Path, samples: Sequence[Sample]) -> None:
    """Encode samples and durably replace the file contents.

    Encoding finishes before the file is opened, so an unencodable list
    leaves the existing file untouched.

    Args:
        path: Sample file path.
        samples: Samples to persist, in order.

    Raises:
        BaroFormatError: If the samples cannot be encoded.
        BaroIOError: If the file cannot be written or synced.
    """
    payload = encode_sample_list(samples)
    try:
        with path.open("wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError as error:
        raise BaroIOError(f"Failed to write sample file {path}: {error.strerror or error}.") from error
    _LOGGER.info(
        "sample_file_written",
        path=str(path),
        byte_count=len(payload),
        sample_count=len(samples),
    )
