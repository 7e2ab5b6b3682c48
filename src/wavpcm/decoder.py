"""WAV to PCM decoder.

Validates a WAV container against the accepted PCM encodings and extracts
its sample payload. The entire file is read into memory before parsing.

Example Usage
-------------
>>> from wavpcm import DecodeResult, decode_wav
>>> result, audio = decode_wav("take_01.wav")
>>> if result is DecodeResult.SUCCESS:
...     print(audio.sample_rate, audio.channels, len(audio.pcm_data))
... else:
...     print(result.label)
"""

import errno
import logging
import os
import stat
from pathlib import Path

from wavpcm.format.riff import (
    AUDIO_FORMAT_OFFSET,
    BITS_PER_SAMPLE_OFFSET,
    EXPECTED_DATA_POS_START,
    FMT_ID,
    FMT_ID_OFFSET,
    NUM_CHANNELS_OFFSET,
    RIFF_ID,
    RIFF_ID_OFFSET,
    SAMPLE_RATE_OFFSET,
    WAVE_FORMAT_PCM,
    WAVE_ID,
    WAVE_ID_OFFSET,
    find_data_chunk,
    has_fourcc,
    read_u16,
    read_u32,
)
from wavpcm.format.types import DecodedAudio, DecodeError, DecodeResult
from wavpcm.format.validation import (
    contains_bits_per_sample,
    contains_channels,
    contains_sample_rate,
)

logger = logging.getLogger(__name__)

WAV_EXTENSION = ".wav"

_READ_PERMISSIONS = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH
_LOCKED_ERRNOS = frozenset({errno.EBUSY, errno.ETXTBSY})

DecodeOutcome = tuple[DecodeResult, DecodedAudio | None]


def decode_wav(path: str | os.PathLike[str]) -> DecodeOutcome:
    """Decode a PCM WAV file into raw sample bytes and format metadata.

    This function never raises. Every failure, including unexpected I/O
    errors, is reported through the returned DecodeResult.

    Args:
        path: Path to the ``.wav`` file.

    Returns:
        Tuple of (result, audio). ``audio`` is a DecodedAudio when result is
        SUCCESS and None otherwise.
    """
    path = Path(path)

    result = _check_preconditions(path)
    if result is not DecodeResult.SUCCESS:
        return _fail(result, path)

    try:
        raw = _read_file(path)
    except OSError as e:
        if e.errno in _LOCKED_ERRNOS:
            return _fail(DecodeResult.FILE_LOCKED, path)
        logger.debug("Reading %s failed", path, exc_info=True)
        return _fail(DecodeResult.UNKNOWN_READ_ERROR, path)
    except Exception:
        logger.debug("Unexpected error reading %s", path, exc_info=True)
        return _fail(DecodeResult.UNKNOWN_READ_ERROR, path)

    try:
        result, audio = _parse(raw)
    except Exception:
        logger.debug("Unexpected error parsing %s", path, exc_info=True)
        return _fail(DecodeResult.UNKNOWN_READ_ERROR, path)

    if audio is None:
        return _fail(result, path)

    logger.debug(
        "Decoded %s: %d Hz, %d ch, %d-bit, %d bytes",
        path,
        audio.sample_rate,
        audio.channels,
        audio.bits_per_sample,
        len(audio.pcm_data),
    )
    return DecodeResult.SUCCESS, audio


def load_wav(path: str | os.PathLike[str]) -> DecodedAudio:
    """Decode a PCM WAV file, raising on failure.

    Args:
        path: Path to the ``.wav`` file.

    Returns:
        The decoded audio.

    Raises:
        DecodeError: If decoding fails. ``error.result`` holds the outcome.
    """
    result, audio = decode_wav(path)
    if audio is None:
        raise DecodeError(result, path)
    return audio


def _check_preconditions(path: Path) -> DecodeResult:
    """Filesystem checks performed before any content is read."""
    try:
        if not path.is_file():
            return DecodeResult.FILE_NOT_FOUND

        if path.suffix != WAV_EXTENSION:
            return DecodeResult.INVALID_EXTENSION

        if not path.stat().st_mode & _READ_PERMISSIONS:
            return DecodeResult.UNAUTHORIZED_READ
    except OSError:
        logger.debug("Cannot stat %s", path, exc_info=True)
        return DecodeResult.UNKNOWN_READ_ERROR

    return DecodeResult.SUCCESS


def _read_file(path: Path) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def _parse(raw: bytes) -> DecodeOutcome:
    """Validate a loaded WAV image and extract its PCM payload."""
    file_size = len(raw)

    if file_size == 0:
        return DecodeResult.FILE_EMPTY, None
    if file_size <= EXPECTED_DATA_POS_START:
        return DecodeResult.UNSUPPORTED_FILE_SIZE, None

    if not has_fourcc(raw, RIFF_ID_OFFSET, RIFF_ID):
        return DecodeResult.INVALID_RIFF_MAGIC, None
    if not has_fourcc(raw, WAVE_ID_OFFSET, WAVE_ID):
        return DecodeResult.INVALID_WAVE_MAGIC, None
    if not has_fourcc(raw, FMT_ID_OFFSET, FMT_ID):
        return DecodeResult.INVALID_FMT_CHUNK, None

    # Only integer PCM for now; IEEE float (3) is rejected here as well
    if read_u16(raw, AUDIO_FORMAT_OFFSET) != WAVE_FORMAT_PCM:
        return DecodeResult.INVALID_FORMAT_TYPE, None

    channels = read_u16(raw, NUM_CHANNELS_OFFSET)
    sample_rate = read_u32(raw, SAMPLE_RATE_OFFSET)
    bits_per_sample = read_u16(raw, BITS_PER_SAMPLE_OFFSET)

    # Order matters when several fields are invalid at once
    if not contains_sample_rate(sample_rate):
        return DecodeResult.UNSUPPORTED_SAMPLE_RATE, None
    if not contains_channels(channels):
        return DecodeResult.UNSUPPORTED_CHANNELS, None
    if not contains_bits_per_sample(bits_per_sample):
        return DecodeResult.UNSUPPORTED_BITS_PER_SAMPLE, None

    chunk = find_data_chunk(raw)
    if chunk is None:
        return DecodeResult.MISSING_DATA_CHUNK, None

    data_offset, declared_size = chunk
    if data_offset == 0 or data_offset >= file_size:
        return DecodeResult.MISSING_DATA_CHUNK, None

    # Never trust the declared size beyond the physical end of the file
    data_end = min(file_size, data_offset + declared_size)

    audio = DecodedAudio(
        pcm_data=raw[data_offset:data_end],
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample & 0xFF,
        channels=channels & 0xFF,
    )
    return DecodeResult.SUCCESS, audio


def _fail(result: DecodeResult, path: Path) -> DecodeOutcome:
    logger.debug("Decoding %s failed with %s", path, result.label)
    return result, None
