"""Core constants used across barotool modules.

This module centralizes the sample file layout and CLI defaults.
Keeping values here avoids magic literals in codec and editor logic.
"""

from __future__ import annotations

IMMERSIVE_DISCRIMINANT = 0
TERRAFIRMACRAFT_DISCRIMINANT = 1
GEOLOSYS_DISCRIMINANT = 2

COUNT_STRUCT_FORMAT = ">I"
DISCRIMINANT_STRUCT_FORMAT = ">I"
COORDINATE_STRUCT_FORMAT = ">i"
STRING_LENGTH_STRUCT_FORMAT = ">H"
TIMESTAMP_STRUCT_FORMAT = ">Q"

MAX_RECORD_COUNT = 0xFFFFFFFF
MAX_STRING_BYTES = 0xFFFF
STRING_ENCODING = "utf-8"

LOG_LEVEL_ENV_VAR = "BAROTOOL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")

EDIT_COMMAND_NAME = "edit"
LIST_COMMAND_NAME = "list"
SUPPORTED_COMMAND_NAMES = (EDIT_COMMAND_NAME, LIST_COMMAND_NAME)

PROGRAM_NAME = "barotool"
PROGRAM_VERSION = "0.1.0"
