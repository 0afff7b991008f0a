"""FourCC codec identifiers.

OpenCV identifies codecs by a 4-byte code packed little-endian into an int,
e.g. ``"h264"`` -> ``0x34363268``.
"""

import cv2

from sxs.errors import UnknownCodecError


def codec_to_int(codec: str) -> int:
    """Pack a 4-character codec string into its FourCC integer.

    The string is lowercased first, so ``"H264"`` and ``"h264"`` give the
    same code.

    Raises:
        UnknownCodecError: if *codec* is not exactly 4 ASCII characters.
    """
    if len(codec) != 4 or not codec.isascii():
        raise UnknownCodecError(f"Unknown output codec: {codec}")
    return cv2.VideoWriter_fourcc(*codec.lower())


def int_to_codec(value: int | float) -> str:
    """Decode a packed FourCC (as reported by ``CAP_PROP_FOURCC``)."""
    value = int(value)
    return "".join(chr((value >> shift) & 0xFF) for shift in (0, 8, 16, 24))
