"""Shared fixtures for building WAV images in tests."""

import struct
from collections.abc import Callable
from pathlib import Path

import pytest

BuildWav = Callable[..., bytes]


def build_pcm_wav(
    samples: bytes,
    sample_rate: int = 44100,
    num_channels: int = 2,
    bits_per_sample: int = 16,
    audio_format: int = 1,
    data_size: int | None = None,
) -> bytes:
    """Build a canonical 44-byte-header WAV image around ``samples``.

    Args:
        samples: Raw audio sample data (already in the correct byte format).
        sample_rate: The sample rate in Hz.
        num_channels: Number of audio channels.
        bits_per_sample: Bits per sample.
        audio_format: The fmt chunk format code.
        data_size: Declared data chunk size (default: ``len(samples)``).
    """
    bytes_per_sample = bits_per_sample // 8
    byte_rate = sample_rate * num_channels * bytes_per_sample
    block_align = num_channels * bytes_per_sample

    if data_size is None:
        data_size = len(samples)

    fmt_chunk = struct.pack(
        "<HHIIHH",
        audio_format,
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
    )

    wav = bytearray()
    wav.extend(b"RIFF")
    wav.extend(struct.pack("<I", 36 + len(samples)))
    wav.extend(b"WAVE")
    wav.extend(b"fmt ")
    wav.extend(struct.pack("<I", 16))
    wav.extend(fmt_chunk)
    wav.extend(b"data")
    wav.extend(struct.pack("<I", data_size))
    wav.extend(samples)
    return bytes(wav)


@pytest.fixture(scope="session")
def build_wav() -> BuildWav:
    """Return the WAV image builder."""
    return build_pcm_wav


@pytest.fixture
def write_wav(tmp_path: Path) -> Callable[..., Path]:
    """Write a WAV image to ``tmp_path`` and return its path."""

    def _write(name: str = "test.wav", data: bytes | None = None, **kwargs: object) -> Path:
        if data is None:
            data = build_pcm_wav(kwargs.pop("samples", b"\x01\x02\x03\x04" * 16), **kwargs)  # type: ignore[arg-type]
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
