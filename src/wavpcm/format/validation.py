"""Allow-lists for the PCM encodings accepted by the decoder."""

ALLOWED_SAMPLE_RATES: frozenset[int] = frozenset(
    {
        44100,  # music, CD
        48000,  # film, games
        96000,  # high-res
        192000,  # mastering
    }
)

ALLOWED_CHANNELS: frozenset[int] = frozenset({1, 2})

ALLOWED_BITS_PER_SAMPLE: frozenset[int] = frozenset({16, 24, 32})


def contains_sample_rate(sample_rate: int) -> bool:
    """Check a sample rate against ALLOWED_SAMPLE_RATES."""
    return sample_rate in ALLOWED_SAMPLE_RATES


def contains_channels(channels: int) -> bool:
    """Check a channel count, truncated to 8 bits, against ALLOWED_CHANNELS."""
    return _truncate_u8(channels) in ALLOWED_CHANNELS


def contains_bits_per_sample(bits_per_sample: int) -> bool:
    """Check a bit depth, truncated to 8 bits, against ALLOWED_BITS_PER_SAMPLE."""
    return _truncate_u8(bits_per_sample) in ALLOWED_BITS_PER_SAMPLE


def _truncate_u8(value: int) -> int:
    return value & 0xFF
