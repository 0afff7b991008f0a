"""Encoded video output backed by ``cv2.VideoWriter``."""

import logging
import os
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from sxs.errors import FrameGeometryError, UnopenableOutputError

logger = logging.getLogger(__name__)


class VideoWriterSink:
    """Writes same-sized frames, in order, to a new video file.

    Args:
        path: Output file path.  The container is chosen by OpenCV from the
            extension.
        fourcc: Packed FourCC codec code (see :func:`sxs.codec.codec_to_int`).
        fps: Output frame rate.
        frame_size: ``(width, height)`` every written frame must have.
    """

    def __init__(
        self,
        path: str | Path,
        fourcc: int,
        fps: float,
        frame_size: tuple[int, int],
    ):
        self._path = str(path)
        self._fourcc = fourcc
        self._fps = fps
        self._frame_size = (int(frame_size[0]), int(frame_size[1]))

        self._writer: Optional[cv2.VideoWriter] = None
        self._written = 0

    def open(self) -> None:
        if self._writer is not None:
            return
        os.makedirs(os.path.dirname(self._path) or ".", exist_ok=True)
        self._writer = cv2.VideoWriter(
            self._path, self._fourcc, self._fps, self._frame_size
        )
        if not self._writer.isOpened():
            self._writer = None
            raise UnopenableOutputError(f"Unable to open output file: {self._path}")
        self._written = 0
        logger.debug(
            "VideoWriterSink opened: %s  %dx%d @ %.1f fps",
            self._path, self._frame_size[0], self._frame_size[1], self._fps,
        )

    def write(self, image: np.ndarray) -> None:
        if self._writer is None:
            raise RuntimeError("Sink is not open")
        h, w = image.shape[:2]
        if (w, h) != self._frame_size:
            raise FrameGeometryError(
                f"Frame size {w}x{h} does not match output size "
                f"{self._frame_size[0]}x{self._frame_size[1]}"
            )
        self._writer.write(image)
        self._written += 1

    def close(self) -> None:
        if self._writer is not None:
            self._writer.release()
            self._writer = None
            logger.debug(
                "VideoWriterSink closed: %s (%d frames)", self._path, self._written
            )

    @property
    def path(self) -> str:
        return self._path

    @property
    def frame_size(self) -> tuple[int, int]:
        return self._frame_size

    @property
    def frames_written(self) -> int:
        return self._written

    @property
    def is_open(self) -> bool:
        return self._writer is not None

    def __enter__(self) -> "VideoWriterSink":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
