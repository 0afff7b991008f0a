"""Output side of video-sxs: the encoded file and the live preview."""

from sxs.sinks.writer import VideoWriterSink
from sxs.sinks.preview import FramePreview, NullPreview, WindowPreview

__all__ = [
    "VideoWriterSink",
    "FramePreview",
    "NullPreview",
    "WindowPreview",
]
