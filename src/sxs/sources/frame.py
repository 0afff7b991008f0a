"""Frame dataclass for the video-sxs frame sources."""

from dataclasses import dataclass

import numpy as np


def channel_count(image: np.ndarray) -> int:
    """Number of interleaved channels per pixel of *image*."""
    if image.ndim == 2:
        return 1
    return image.shape[2]


@dataclass
class Frame:
    """A single decoded video frame with metadata.

    Attributes:
        image: Pixel buffer as decoded by OpenCV, shape (H, W) or (H, W, C),
            row-major with interleaved channels (BGR for colour video).
        timestamp: Video time of this frame in seconds.
        frame_number: Sequential counter of frames delivered, starting at 0.
        source_name: Human-readable identifier, e.g. ``"file:left.mp4"``.
        width: Frame width in pixels.
        height: Frame height in pixels.
    """

    image: np.ndarray
    timestamp: float
    frame_number: int
    source_name: str
    width: int
    height: int

    @property
    def channels(self) -> int:
        """Number of interleaved channels per pixel."""
        return channel_count(self.image)
