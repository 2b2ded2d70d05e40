"""Public SDK surface for barotool.

This module provides a stable import path for scripting sample edits.
It re-exports the codec, workflows, and typed sample models.
"""

from __future__ import annotations

from core.config import BaroConfig
from core.errors import (
    BaroConfigError,
    BaroError,
    BaroFormatError,
    BaroIOError,
    BaroNotFoundError,
    BaroUsageError,
)
from core.types import (
    EditRequest,
    EditResult,
    GeolosysData,
    ImmersiveData,
    Sample,
    SampleKey,
    TerraFirmaCraftData,
)
from store.sample_codec import decode_sample_list, encode_sample_list
from store.sample_editor import apply_edit, build_edit_request, edit_sample_file
from store.sample_file import read_sample_file, write_sample_file
from store.sample_listing import list_sample_file, render_sample

__all__ = [
    "BaroConfig",
    "BaroConfigError",
    "BaroError",
    "BaroFormatError",
    "BaroIOError",
    "BaroNotFoundError",
    "BaroUsageError",
    "EditRequest",
    "EditResult",
    "GeolosysData",
    "ImmersiveData",
    "Sample",
    "SampleKey",
    "TerraFirmaCraftData",
    "apply_edit",
    "build_edit_request",
    "decode_sample_list",
    "edit_sample_file",
    "encode_sample_list",
    "list_sample_file",
    "read_sample_file",
    "render_sample",
    "write_sample_file",
]
