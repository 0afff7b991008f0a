"""Error types raised by the side-by-side pipeline.

Every error is terminal: nothing in the package catches them, so a failed
validation ends the run with the message on stderr.
"""


class SxsError(ValueError):
    """Base class for all video-sxs errors."""


class MissingFlagError(SxsError):
    """A required option (input1, input2, output) is empty."""


class UnopenableInputError(SxsError):
    """OpenCV could not create a capture handle for an input video."""


class UnopenableOutputError(SxsError):
    """OpenCV could not create a writer for the output path."""


class StartFrameRangeError(SxsError):
    """A requested start frame lies outside ``[0, frame_count)``."""


class ChannelMismatchError(SxsError):
    """The two videos decode to frames with different channel counts."""


class UnknownCodecError(SxsError):
    """The FourCC codec string is not exactly four byte-sized characters."""


class FrameGeometryError(SxsError):
    """A frame handed to the writer does not match the negotiated size."""


class FrameReadError(SxsError):
    """A source could not decode the next frame mid-run."""
