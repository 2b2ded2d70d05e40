"""Byte-exact codec for sample files.

Layout, big-endian throughout:

    File       := count:u32 Record[count]
    Record     := discriminant:u32 dimension:i32 x:i32 z:i32 Payload
    Payload(0) := mineral:LString liquid:LString timestamp:u64   Immersive
    Payload(1) := ore:LString                                    TerraFirmaCraft
    Payload(2) := ore:LString                                    Geolosys
    LString    := length:u16 bytes:u8[length]                    UTF-8

Bytes after the last declared record are ignored on decode.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, Callable, Sequence

from core.constants import (
    COORDINATE_STRUCT_FORMAT,
    COUNT_STRUCT_FORMAT,
    DISCRIMINANT_STRUCT_FORMAT,
    GEOLOSYS_DISCRIMINANT,
    IMMERSIVE_DISCRIMINANT,
    MAX_RECORD_COUNT,
    MAX_STRING_BYTES,
    STRING_ENCODING,
    STRING_LENGTH_STRUCT_FORMAT,
    TERRAFIRMACRAFT_DISCRIMINANT,
    TIMESTAMP_STRUCT_FORMAT,
)
from core.errors import BaroFormatError
from core.types import GeolosysData, ImmersiveData, Sample, SampleData, TerraFirmaCraftData
from store.byte_reader import ByteReader


def decode_sample_list(payload: bytes) -> list[Sample]:
    """Decode a complete sample file payload.

    Args:
        payload: Raw file bytes.

    Returns:
        Samples in file order.

    Raises:
        BaroFormatError: If the payload is truncated or malformed.
    """
    reader = ByteReader(payload)
    count = reader.read_u32("record count")
    return [decode_sample(reader) for _ in range(count)]


def encode_sample_list(samples: Sequence[Sample]) -> bytes:
    """Encode samples into a complete sample file payload.

    Args:
        samples: Samples in the order they should be stored.

    Returns:
        Encoded file bytes.

    Raises:
        BaroFormatError: If a count, integer, or string cannot be represented.
    """
    if len(samples) > MAX_RECORD_COUNT:
        raise BaroFormatError(
            f"Cannot encode {len(samples)} samples: the record count field holds "
            f"at most {MAX_RECORD_COUNT}."
        )
    writer = io.BytesIO()
    writer.write(_pack(COUNT_STRUCT_FORMAT, len(samples), "record count"))
    for sample in samples:
        encode_sample(sample, writer)
    return writer.getvalue()


def decode_sample(reader: ByteReader) -> Sample:
    """Decode one record header and its variant payload.

    Args:
        reader: Reader positioned at the record discriminant.

    Returns:
        Decoded sample.

    Raises:
        BaroFormatError: If the discriminant is unknown or data is short.
    """
    discriminant_offset = reader.offset
    discriminant = reader.read_u32("discriminant")
    decode_payload = _PAYLOAD_DECODERS.get(discriminant)
    if decode_payload is None:
        raise BaroFormatError(
            f"Invalid sample type {discriminant} at offset {discriminant_offset}: "
            f"expected one of {sorted(_PAYLOAD_DECODERS)}."
        )
    dimension = reader.read_i32("dimension")
    x = reader.read_i32("x coordinate")
    z = reader.read_i32("z coordinate")
    return Sample(dimension=dimension, x=x, z=z, data=decode_payload(reader))


def encode_sample(sample: Sample, writer: BinaryIO) -> None:
    """Encode one record onto a binary writer.

    The full record is assembled before anything is written, so a failed
    encode never leaves a partial record on ``writer``.

    Args:
        sample: Sample to encode.
        writer: Binary destination.

    Raises:
        BaroFormatError: If a field cannot be represented.
    """
    parts = [
        _pack(DISCRIMINANT_STRUCT_FORMAT, discriminant_for(sample.data), "discriminant"),
        _pack(COORDINATE_STRUCT_FORMAT, sample.dimension, "dimension"),
        _pack(COORDINATE_STRUCT_FORMAT, sample.x, "x coordinate"),
        _pack(COORDINATE_STRUCT_FORMAT, sample.z, "z coordinate"),
    ]
    data = sample.data
    if isinstance(data, ImmersiveData):
        parts.append(_encode_string(data.mineral, "mineral"))
        parts.append(_encode_string(data.liquid, "liquid"))
        parts.append(_pack(TIMESTAMP_STRUCT_FORMAT, data.timestamp, "timestamp"))
    else:
        parts.append(_encode_string(data.ore, "ore"))
    writer.write(b"".join(parts))


def discriminant_for(data: SampleData) -> int:
    """Return the stored discriminant for a sample payload.

    Raises:
        BaroFormatError: If the payload is not a known variant.
    """
    if isinstance(data, ImmersiveData):
        return IMMERSIVE_DISCRIMINANT
    if isinstance(data, TerraFirmaCraftData):
        return TERRAFIRMACRAFT_DISCRIMINANT
    if isinstance(data, GeolosysData):
        return GEOLOSYS_DISCRIMINANT
    raise BaroFormatError(f"Unsupported sample payload type: {type(data).__name__}.")


def read_string(reader: ByteReader, field_name: str = "string") -> str:
    """Read a u16 length-prefixed UTF-8 string.

    Raises:
        BaroFormatError: If the length overruns the data or bytes are not UTF-8.
    """
    length = reader.read_u16(f"{field_name} length")
    start = reader.offset
    raw = reader.read_exact(length, field_name)
    try:
        return raw.decode(STRING_ENCODING)
    except UnicodeDecodeError as error:
        raise BaroFormatError(
            f"Invalid UTF-8 in {field_name} at offset {start + error.start}: {error.reason}."
        ) from error


def write_string(writer: BinaryIO, text: str, field_name: str = "string") -> None:
    """Write a u16 length-prefixed UTF-8 string.

    Raises:
        BaroFormatError: If the encoded text exceeds 65535 bytes.
    """
    writer.write(_encode_string(text, field_name))


def _encode_string(text: str, field_name: str) -> bytes:
    try:
        raw = text.encode(STRING_ENCODING)
    except UnicodeEncodeError as error:
        raise BaroFormatError(f"Cannot encode {field_name} as UTF-8: {error.reason}.") from error
    if len(raw) > MAX_STRING_BYTES:
        raise BaroFormatError(
            f"Cannot encode {field_name}: {len(raw)} UTF-8 bytes exceeds "
            f"the {MAX_STRING_BYTES}-byte limit."
        )
    return _pack(STRING_LENGTH_STRUCT_FORMAT, len(raw), f"{field_name} length") + raw


def _pack(struct_format: str, value: int, field_name: str) -> bytes:
    try:
        return struct.pack(struct_format, value)
    except struct.error as error:
        raise BaroFormatError(f"Cannot encode {field_name} {value!r}: {error}.") from error


def _decode_immersive(reader: ByteReader) -> ImmersiveData:
    mineral = read_string(reader, "mineral")
    liquid = read_string(reader, "liquid")
    timestamp = reader.read_u64("timestamp")
    return ImmersiveData(mineral=mineral, liquid=liquid, timestamp=timestamp)


def _decode_terrafirmacraft(reader: ByteReader) -> TerraFirmaCraftData:
    return TerraFirmaCraftData(ore=read_string(reader, "ore"))


def _decode_geolosys(reader: ByteReader) -> GeolosysData:
    return GeolosysData(ore=read_string(reader, "ore"))


_PAYLOAD_DECODERS: dict[int, Callable[[ByteReader], SampleData]] = {
    IMMERSIVE_DISCRIMINANT: _decode_immersive,
    TERRAFIRMACRAFT_DISCRIMINANT: _decode_terrafirmacraft,
    GEOLOSYS_DISCRIMINANT: _decode_geolosys,
}
