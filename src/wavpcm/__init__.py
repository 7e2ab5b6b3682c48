"""wavpcm - PCM extraction from WAV files.

This package validates WAV containers against a restricted set of PCM
encodings and exposes their raw sample bytes and format metadata.

Example Usage
-------------
>>> from wavpcm import DecodeResult, decode_wav
>>>
>>> result, audio = decode_wav("take_01.wav")
>>> if result is DecodeResult.SUCCESS:
...     print(f"{audio.sample_rate} Hz, {audio.channels} ch, {audio.bits_per_sample}-bit")
...     samples = audio.to_numpy()  # (num_frames, channels)
... else:
...     print(f"Rejected: {result.label}")
"""

from wavpcm.decoder import decode_wav, load_wav
from wavpcm.format import (
    ALLOWED_BITS_PER_SAMPLE,
    ALLOWED_CHANNELS,
    ALLOWED_SAMPLE_RATES,
    DecodedAudio,
    DecodeError,
    DecodeResult,
    pcm_to_array,
    pcm_to_float,
    result_to_string,
)

__all__ = [
    # Decoder
    "decode_wav",
    "load_wav",
    # Types
    "DecodeResult",
    "DecodedAudio",
    "DecodeError",
    "result_to_string",
    # Allow-lists
    "ALLOWED_SAMPLE_RATES",
    "ALLOWED_CHANNELS",
    "ALLOWED_BITS_PER_SAMPLE",
    # Samples
    "pcm_to_array",
    "pcm_to_float",
]
