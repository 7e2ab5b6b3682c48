"""WAV container format module.

This module provides the building blocks used by the decoder: bounds-checked
RIFF field readers, the accepted-encoding allow-lists, the decode result
taxonomy, and numpy views of decoded PCM payloads.

Format Overview
---------------
Only the canonical PCM layout is accepted:

    +----------------------------------------+
    | RIFF Header ("WAVE")          bytes 0-12|
    +----------------------------------------+
    | fmt  chunk (audio format)    bytes 12-36|
    |   - AudioFormat = 1 (PCM)              |
    |   - 1 or 2 channels                    |
    |   - 44.1/48/96/192 kHz                 |
    |   - 16/24/32 bits per sample           |
    +----------------------------------------+
    | data chunk (interleaved PCM samples)   |
    +----------------------------------------+
"""

from wavpcm.format.riff import RiffError
from wavpcm.format.samples import pcm_to_array, pcm_to_float
from wavpcm.format.types import (
    DecodedAudio,
    DecodeError,
    DecodeResult,
    result_to_string,
)
from wavpcm.format.validation import (
    ALLOWED_BITS_PER_SAMPLE,
    ALLOWED_CHANNELS,
    ALLOWED_SAMPLE_RATES,
)

__all__ = [
    # Types
    "DecodeResult",
    "DecodedAudio",
    "DecodeError",
    "RiffError",
    "result_to_string",
    # Allow-lists
    "ALLOWED_SAMPLE_RATES",
    "ALLOWED_CHANNELS",
    "ALLOWED_BITS_PER_SAMPLE",
    # Samples
    "pcm_to_array",
    "pcm_to_float",
]
