"""RIFF/WAV field utilities for PCM extraction.

This module provides bounds-checked readers for the fixed-offset fields of a
canonical PCM WAV header, and the linear scan used to locate the ``data`` chunk.

Header layout (little-endian)::

    Offset | Size | Field
    -------|------|---------------------------------
    0      | 4    | ChunkID = "RIFF"
    4      | 4    | ChunkSize
    8      | 4    | Format = "WAVE"
    12     | 4    | Subchunk1ID = "fmt "
    16     | 4    | Subchunk1Size
    20     | 2    | AudioFormat (1 = PCM, 3 = IEEE float)
    22     | 2    | NumChannels
    24     | 4    | SampleRate
    28     | 4    | ByteRate
    32     | 2    | BlockAlign
    34     | 2    | BitsPerSample
    ??     | 4    | Subchunk2ID = "data"
    ??+4   | 4    | Subchunk2Size
    ??+8   | *    | PCM sample data
"""

import struct

# FourCC identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

# Audio format codes
WAVE_FORMAT_PCM = 1
WAVE_FORMAT_IEEE_FLOAT = 3

# Fixed field offsets
RIFF_ID_OFFSET = 0
WAVE_ID_OFFSET = 8
FMT_ID_OFFSET = 12
AUDIO_FORMAT_OFFSET = 20
NUM_CHANNELS_OFFSET = 22
SAMPLE_RATE_OFFSET = 24
BITS_PER_SAMPLE_OFFSET = 34

# Files must be larger than this; the data chunk scan also starts here
EXPECTED_DATA_POS_START = 12

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class RiffError(Exception):
    """Error reading a field from a RIFF buffer."""


def read_u16(buffer: bytes, offset: int) -> int:
    """Read an unsigned little-endian 16-bit field.

    Args:
        buffer: The raw file contents.
        offset: Byte offset of the field.

    Returns:
        The decoded integer.

    Raises:
        RiffError: If the field extends past the end of the buffer.
    """
    if offset < 0 or offset + _U16.size > len(buffer):
        raise RiffError(f"u16 field at offset {offset} is outside a {len(buffer)}-byte buffer")
    return _U16.unpack_from(buffer, offset)[0]


def read_u32(buffer: bytes, offset: int) -> int:
    """Read an unsigned little-endian 32-bit field.

    Args:
        buffer: The raw file contents.
        offset: Byte offset of the field.

    Returns:
        The decoded integer.

    Raises:
        RiffError: If the field extends past the end of the buffer.
    """
    if offset < 0 or offset + _U32.size > len(buffer):
        raise RiffError(f"u32 field at offset {offset} is outside a {len(buffer)}-byte buffer")
    return _U32.unpack_from(buffer, offset)[0]


def has_fourcc(buffer: bytes, offset: int, fourcc: bytes) -> bool:
    """Check whether the four bytes at ``offset`` equal ``fourcc``.

    A slice that runs past the end of the buffer never matches.
    """
    return buffer[offset : offset + 4] == fourcc


def find_data_chunk(buffer: bytes) -> tuple[int, int] | None:
    """Locate the first ``data`` literal at or after byte 12.

    This is a byte-by-byte scan, not a chunk walk: payload bytes that happen
    to spell ``data`` before the real chunk header will be matched first.

    Args:
        buffer: The raw file contents.

    Returns:
        Tuple of (data_offset, declared_size) for the first match, where
        data_offset points just past the chunk header. None if no match.
    """
    index = buffer.find(DATA_ID, EXPECTED_DATA_POS_START)

    # A match must leave room for the size field plus at least one more byte
    if index < 0 or index + 8 >= len(buffer):
        return None

    return index + 8, read_u32(buffer, index + 4)
