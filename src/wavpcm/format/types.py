"""Python types for WAV decode results.

These types describe the outcome of a decode call and the PCM payload it
produces on success.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike

import numpy as np
from numpy.typing import NDArray

from wavpcm.format.samples import pcm_to_array


class DecodeResult(IntEnum):
    """Closed set of decode outcomes.

    Exactly one value is produced per decode call. Numeric codes are stable.
    """

    SUCCESS = 0
    """Decoding succeeded."""

    # File operations
    FILE_NOT_FOUND = 1
    INVALID_EXTENSION = 2
    UNAUTHORIZED_READ = 3
    FILE_LOCKED = 4
    UNKNOWN_READ_ERROR = 5
    FILE_EMPTY = 6

    # Container validation
    UNSUPPORTED_FILE_SIZE = 7
    INVALID_RIFF_MAGIC = 8
    INVALID_WAVE_MAGIC = 9
    INVALID_FMT_CHUNK = 10
    INVALID_FORMAT_TYPE = 11

    UNSUPPORTED_WAV_FORMAT = 12
    """Reserved for a future non-PCM path. Never produced."""

    UNSUPPORTED_CHANNELS = 13
    UNSUPPORTED_SAMPLE_RATE = 14
    UNSUPPORTED_BITS_PER_SAMPLE = 15
    MISSING_DATA_CHUNK = 16

    @property
    def ok(self) -> bool:
        """Whether this outcome is SUCCESS."""
        return self is DecodeResult.SUCCESS

    @property
    def label(self) -> str:
        """Diagnostic name, e.g. ``RESULT_FILE_NOT_FOUND``."""
        return result_to_string(self)

    @property
    def description(self) -> str:
        """Human-readable explanation of this outcome."""
        return _DESCRIPTIONS.get(self, "Unknown result")


_DESCRIPTIONS = {
    DecodeResult.SUCCESS: "Decoded successfully",
    DecodeResult.FILE_NOT_FOUND: "File does not exist",
    DecodeResult.INVALID_EXTENSION: "File is not '.wav'",
    DecodeResult.UNAUTHORIZED_READ: "Not authorized to read this file",
    DecodeResult.FILE_LOCKED: "File is in use",
    DecodeResult.UNKNOWN_READ_ERROR: "Unknown error while reading file",
    DecodeResult.FILE_EMPTY: "File has no content",
    DecodeResult.UNSUPPORTED_FILE_SIZE: "File is too small to hold a WAV header",
    DecodeResult.INVALID_RIFF_MAGIC: "Bytes 0-4 must be 'RIFF'",
    DecodeResult.INVALID_WAVE_MAGIC: "Bytes 8-12 must be 'WAVE'",
    DecodeResult.INVALID_FMT_CHUNK: "Bytes 12-16 must be 'fmt '",
    DecodeResult.INVALID_FORMAT_TYPE: "Audio format must be integer PCM (1)",
    DecodeResult.UNSUPPORTED_WAV_FORMAT: "Unsupported WAV format",
    DecodeResult.UNSUPPORTED_CHANNELS: "Channel count must be 1 or 2",
    DecodeResult.UNSUPPORTED_SAMPLE_RATE: "Sample rate must be 44100, 48000, 96000 or 192000 Hz",
    DecodeResult.UNSUPPORTED_BITS_PER_SAMPLE: "Bits per sample must be 16, 24 or 32",
    DecodeResult.MISSING_DATA_CHUNK: "No usable 'data' chunk",
}


def result_to_string(result: int) -> str:
    """Map an outcome to its diagnostic name.

    Values outside the closed outcome set map to ``RESULT_UNKNOWN``.
    """
    match result:
        case DecodeResult.SUCCESS:
            return "RESULT_SUCCESS"
        case DecodeResult.FILE_NOT_FOUND:
            return "RESULT_FILE_NOT_FOUND"
        case DecodeResult.INVALID_EXTENSION:
            return "RESULT_INVALID_EXTENSION"
        case DecodeResult.UNAUTHORIZED_READ:
            return "RESULT_UNAUTHORIZED_READ"
        case DecodeResult.FILE_LOCKED:
            return "RESULT_FILE_LOCKED"
        case DecodeResult.UNKNOWN_READ_ERROR:
            return "RESULT_UNKNOWN_READ_ERROR"
        case DecodeResult.FILE_EMPTY:
            return "RESULT_FILE_EMPTY"
        case DecodeResult.UNSUPPORTED_FILE_SIZE:
            return "RESULT_UNSUPPORTED_FILE_SIZE"
        case DecodeResult.INVALID_RIFF_MAGIC:
            return "RESULT_INVALID_RIFF_MAGIC"
        case DecodeResult.INVALID_WAVE_MAGIC:
            return "RESULT_INVALID_WAVE_MAGIC"
        case DecodeResult.INVALID_FMT_CHUNK:
            return "RESULT_INVALID_FMT_CHUNK"
        case DecodeResult.INVALID_FORMAT_TYPE:
            return "RESULT_INVALID_FORMAT_TYPE"
        case DecodeResult.UNSUPPORTED_WAV_FORMAT:
            return "RESULT_UNSUPPORTED_WAV_FORMAT"
        case DecodeResult.UNSUPPORTED_CHANNELS:
            return "RESULT_UNSUPPORTED_CHANNELS"
        case DecodeResult.UNSUPPORTED_SAMPLE_RATE:
            return "RESULT_UNSUPPORTED_SAMPLE_RATE"
        case DecodeResult.UNSUPPORTED_BITS_PER_SAMPLE:
            return "RESULT_UNSUPPORTED_BITS_PER_SAMPLE"
        case DecodeResult.MISSING_DATA_CHUNK:
            return "RESULT_MISSING_DATA_CHUNK"
        case _:
            return "RESULT_UNKNOWN"


class DecodeError(Exception):
    """Raised by ``load_wav`` when a file cannot be decoded."""

    def __init__(self, result: DecodeResult, path: str | PathLike[str] | None = None) -> None:
        self.result = result
        self.path = path
        message = f"{result.label}: {result.description}"
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


@dataclass(frozen=True)
class DecodedAudio:
    """PCM payload and format metadata of a validated WAV file."""

    pcm_data: bytes = field(repr=False)
    """Raw little-endian PCM sample bytes."""

    sample_rate: int
    """Sample rate in Hz."""

    bits_per_sample: int
    """Bits per sample (16, 24 or 32)."""

    channels: int
    """Number of interleaved channels (1 or 2)."""

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        """Bytes per frame across all channels."""
        return self.channels * self.bytes_per_sample

    @property
    def num_frames(self) -> int:
        """Number of complete frames in the payload."""
        return len(self.pcm_data) // self.block_align

    @property
    def duration_seconds(self) -> float:
        return self.num_frames / self.sample_rate

    def to_numpy(self) -> NDArray[np.int32] | NDArray[np.int16]:
        """Interpret the payload as a ``(num_frames, channels)`` integer array."""
        return pcm_to_array(self.pcm_data, self.bits_per_sample, self.channels)
