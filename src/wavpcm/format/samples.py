"""Interpret decoded PCM payloads as numpy sample arrays.

Payloads are interleaved little-endian signed integers. 24-bit samples are
sign-extended into int32.
"""

import numpy as np
from numpy.typing import NDArray

_FULL_SCALE = {
    16: 32768.0,  # 2^15
    24: 8388608.0,  # 2^23
    32: 2147483648.0,  # 2^31
}


def pcm_to_array(
    pcm_data: bytes,
    bits_per_sample: int,
    channels: int,
) -> NDArray[np.int32] | NDArray[np.int16]:
    """Decode interleaved PCM bytes into integer samples.

    Trailing bytes that do not make up a whole frame are dropped.

    Args:
        pcm_data: Raw PCM payload.
        bits_per_sample: Sample bit depth (16, 24, or 32).
        channels: Number of interleaved channels.

    Returns:
        Array of shape (num_frames, channels). int16 for 16-bit data,
        int32 otherwise.

    Raises:
        ValueError: If the bit depth or channel count is unsupported.
    """
    if bits_per_sample not in _FULL_SCALE:
        raise ValueError(f"Unsupported bit depth: {bits_per_sample}")
    if channels < 1:
        raise ValueError(f"Channel count must be positive, got {channels}")

    bytes_per_sample = bits_per_sample // 8
    block_align = bytes_per_sample * channels
    usable = len(pcm_data) - len(pcm_data) % block_align
    data = pcm_data[:usable]

    if bits_per_sample == 16:
        samples = np.frombuffer(data, dtype="<i2")
    elif bits_per_sample == 24:
        samples = _decode_24bit(data)
    else:
        samples = np.frombuffer(data, dtype="<i4")

    return samples.reshape(-1, channels)


def pcm_to_float(pcm_data: bytes, bits_per_sample: int, channels: int) -> NDArray[np.float32]:
    """Decode interleaved PCM bytes into float32 samples in [-1, 1)."""
    samples = pcm_to_array(pcm_data, bits_per_sample, channels)
    return (samples.astype(np.float64) / _FULL_SCALE[bits_per_sample]).astype(np.float32)


def _decode_24bit(data: bytes) -> NDArray[np.int32]:
    """Decode packed 24-bit samples, sign-extending into int32."""
    raw = np.frombuffer(data, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
    values = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
    return np.where(values >= 0x800000, values - 0x1000000, values).astype(np.int32)
