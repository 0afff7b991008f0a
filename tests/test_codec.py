"""Tests for FourCC packing."""

import cv2
import pytest

from sxs.codec import codec_to_int, int_to_codec
from sxs.errors import SxsError, UnknownCodecError


class TestCodecToInt:
    def test_little_endian_packing(self):
        assert codec_to_int("h264") == (
            ord("h") | ord("2") << 8 | ord("6") << 16 | ord("4") << 24
        )

    def test_case_insensitive(self):
        assert codec_to_int("MJPG") == codec_to_int("mjpg")
        assert codec_to_int("XviD") == codec_to_int("xvid")

    @pytest.mark.parametrize("codec", ["", "h26", "h2645", "mpeg-4"])
    def test_wrong_length_rejected(self, codec):
        with pytest.raises(UnknownCodecError, match="Unknown output codec"):
            codec_to_int(codec)

    @pytest.mark.parametrize("codec", ["h26一", "ÀBCD", "h26é"])
    def test_non_ascii_rejected(self, codec):
        with pytest.raises(UnknownCodecError):
            codec_to_int(codec)

    @pytest.mark.parametrize("codec", ["h264", "mjpg", "avc1", "xvid"])
    def test_matches_opencv_fourcc(self, codec):
        assert codec_to_int(codec.upper()) == cv2.VideoWriter_fourcc(*codec)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            codec_to_int("bad")
        assert issubclass(UnknownCodecError, SxsError)


class TestIntToCodec:
    @pytest.mark.parametrize("codec", ["h264", "MJPG", "Avc1", "mp4v", "DIVX"])
    def test_round_trip_lowercases(self, codec):
        assert int_to_codec(codec_to_int(codec)) == codec.lower()

    def test_accepts_float(self):
        # CAP_PROP_FOURCC is reported as a double
        assert int_to_codec(float(codec_to_int("avc1"))) == "avc1"

    def test_masks_high_bits(self):
        value = codec_to_int("xvid") | (1 << 40)
        assert int_to_codec(value) == "xvid"
