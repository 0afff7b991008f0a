"""Frame source abstraction for video-sxs.

Quick start::

    from sxs.sources import VideoFileSource

    with VideoFileSource("left.mp4", name="Video 1") as src:
        for frame in src:
            print(frame.frame_number, frame.channels)
"""

from sxs.sources.frame import Frame
from sxs.sources.base import FrameSource
from sxs.sources.video_file import VideoFileSource

__all__ = [
    "Frame",
    "FrameSource",
    "VideoFileSource",
]
