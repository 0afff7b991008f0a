"""Dimension negotiation and the left/right frame splice."""

import logging
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np

from sxs.errors import ChannelMismatchError, FrameGeometryError
from sxs.sources.frame import channel_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameGeometry:
    """Output geometry agreed between the two inputs.

    Attributes:
        frame_size: ``(width, height)`` every output frame has.
        fps: Output frame rate.
        resize_required: Whether the inputs differ in size.
        adapt_first: ``True`` when video 1 is resized to video 2, ``False``
            when video 2 is resized to video 1.
    """

    frame_size: tuple[int, int]
    fps: float
    resize_required: bool
    adapt_first: bool

    @property
    def width(self) -> int:
        return self.frame_size[0]

    @property
    def height(self) -> int:
        return self.frame_size[1]


def negotiate_geometry(
    size1: tuple[int, int],
    fps1: float,
    size2: tuple[int, int],
    fps2: float,
    adapt_first: bool = False,
) -> FrameGeometry:
    """Pick the reference video and derive the output geometry.

    The output takes the size and frame rate of the reference video: video 2
    when *adapt_first* is set, otherwise video 1.
    """
    size1 = (int(size1[0]), int(size1[1]))
    size2 = (int(size2[0]), int(size2[1]))
    return FrameGeometry(
        frame_size=size2 if adapt_first else size1,
        fps=fps2 if adapt_first else fps1,
        resize_required=size1 != size2,
        adapt_first=adapt_first,
    )


def divider_value(dtype: np.dtype) -> int | float:
    """Maximum sample value for *dtype* (white)."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        return np.iinfo(dtype).max
    return 1.0


def resize_to(image: np.ndarray, size: tuple[int, int]) -> np.ndarray:
    """Resize *image* to ``(width, height)`` with OpenCV's default bilinear."""
    return cv2.resize(image, size)


def splice_halves(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Overwrite the left half of *right* with *left* and draw the divider.

    Each row is handled as a flat run of ``width * channels`` samples. The
    first ``width * channels // 2`` samples come from *left*; the next
    ``channels`` samples are set to the maximum sample value. For odd widths
    the split can fall inside a pixel.

    *right* is modified in place and returned. A non-contiguous *right* is
    copied first and the copy is returned.
    """
    if not right.flags.c_contiguous:
        right = np.ascontiguousarray(right)
    height, width = right.shape[:2]
    channels = channel_count(right)

    split = width * channels // 2
    dst = right.reshape(height, width * channels)
    src = np.ascontiguousarray(left).reshape(left.shape[0], -1)
    dst[:, :split] = src[:height, :split]
    dst[:, split:split + channels] = divider_value(right.dtype)
    return right


class SideBySideCompositor:
    """Turns pairs of decoded frames into side-by-side output frames.

    The channel count of the first video-1 frame becomes the contract for
    the whole run; every video-2 frame must match it.
    """

    def __init__(self, geometry: FrameGeometry):
        self.geometry = geometry
        self.channels: Optional[int] = None

    def compose(self, image1: np.ndarray, image2: np.ndarray) -> np.ndarray:
        """Return the composited frame built on *image2*'s buffer.

        Raises:
            ChannelMismatchError: if *image2*'s channel count differs from
                the one recorded on the first call.
            FrameGeometryError: if a frame's decoded size does not match
                the negotiated output size.
        """
        if self.geometry.resize_required:
            if self.geometry.adapt_first:
                image1 = resize_to(image1, self.geometry.frame_size)
            else:
                image2 = resize_to(image2, self.geometry.frame_size)

        if self.channels is None:
            self.channels = channel_count(image1)
            logger.info("Number of channels detected: %d", self.channels)
        if channel_count(image2) != self.channels:
            raise ChannelMismatchError(
                "Mismatched number of channels in videos 1 and 2: "
                f"{self.channels}, {channel_count(image2)}"
            )

        # Decoded frames can disagree with the size the container reports.
        expected = (self.geometry.height, self.geometry.width)
        for index, image in ((1, image1), (2, image2)):
            if image.shape[:2] != expected:
                raise FrameGeometryError(
                    f"Video {index} frame is {image.shape[1]}x{image.shape[0]}, "
                    f"expected {self.geometry.width}x{self.geometry.height}"
                )

        return splice_halves(image1, image2)
