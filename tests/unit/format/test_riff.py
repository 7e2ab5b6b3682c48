"""Unit tests for RIFF field readers."""

import pytest

from wavpcm.format.riff import (
    DATA_ID,
    RiffError,
    find_data_chunk,
    has_fourcc,
    read_u16,
    read_u32,
)


class TestFieldReaders:
    """Tests for bounds-checked little-endian reads."""

    def test_read_u16_little_endian(self) -> None:
        assert read_u16(b"\x00\x01\x02", 1) == 0x0201

    def test_read_u32_little_endian(self) -> None:
        assert read_u32(b"\x44\xac\x00\x00", 0) == 44100

    def test_read_u32_max_value(self) -> None:
        assert read_u32(b"\xff\xff\xff\xff", 0) == 0xFFFFFFFF

    @pytest.mark.parametrize("offset", [-1, 2, 3, 100])
    def test_read_u16_out_of_bounds(self, offset: int) -> None:
        with pytest.raises(RiffError):
            read_u16(b"\x00\x01\x02", offset)

    @pytest.mark.parametrize("offset", [-1, 1, 4])
    def test_read_u32_out_of_bounds(self, offset: int) -> None:
        with pytest.raises(RiffError):
            read_u32(b"\x00\x01\x02\x03", offset)

    def test_has_fourcc(self) -> None:
        buffer = b"RIFF\x00\x00\x00\x00WAVE"

        assert has_fourcc(buffer, 0, b"RIFF")
        assert has_fourcc(buffer, 8, b"WAVE")
        assert not has_fourcc(buffer, 4, b"WAVE")

    def test_has_fourcc_short_buffer(self) -> None:
        """A slice running off the end never matches."""
        assert not has_fourcc(b"RIFF\x00\x00\x00\x00WAV", 8, b"WAVE")


class TestFindDataChunk:
    """Tests for the first-match data chunk scan."""

    def test_finds_chunk_after_header(self) -> None:
        buffer = b"\x00" * 12 + DATA_ID + (3).to_bytes(4, "little") + b"abc"

        assert find_data_chunk(buffer) == (20, 3)

    def test_ignores_literal_before_offset_twelve(self) -> None:
        buffer = b"data" + b"\x00" * 20

        assert find_data_chunk(buffer) is None

    def test_literal_at_offset_twelve(self) -> None:
        buffer = b"\x00" * 12 + DATA_ID + b"\x10\x00\x00\x00" + b"\x01"

        assert find_data_chunk(buffer) == (20, 16)

    def test_first_match_wins(self) -> None:
        buffer = (
            b"\x00" * 12
            + DATA_ID
            + (1).to_bytes(4, "little")
            + b"\x00" * 4
            + DATA_ID
            + (2).to_bytes(4, "little")
            + b"\x00\x00"
        )

        assert find_data_chunk(buffer) == (20, 1)

    def test_match_needs_a_byte_after_size_field(self) -> None:
        """The scan stops eight bytes short of the end of the buffer."""
        buffer = b"\x00" * 12 + DATA_ID + b"\x00" * 4

        assert find_data_chunk(buffer) is None

    def test_size_field_may_itself_spell_data(self) -> None:
        buffer = b"\x00" * 12 + b"datadata\x00"

        assert find_data_chunk(buffer) == (20, int.from_bytes(b"data", "little"))

    def test_no_match(self) -> None:
        assert find_data_chunk(b"\x00" * 64) is None
