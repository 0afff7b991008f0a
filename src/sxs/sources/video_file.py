"""Pre-recorded video file frame source."""

import logging
from pathlib import Path
from typing import Optional

import cv2

from sxs.codec import int_to_codec
from sxs.errors import UnopenableInputError
from sxs.sources.base import FrameSource
from sxs.sources.frame import Frame

logger = logging.getLogger(__name__)


class VideoFileSource(FrameSource):
    """Frame source backed by a video file on disk.

    Args:
        path: Path to the video file (mp4, avi, mkv, etc.).  Anything
            ``cv2.VideoCapture`` accepts works, including URLs.
        name: Label for log lines and errors, e.g. ``"Video 1"``.
    """

    def __init__(self, path: str | Path, name: str = "Video"):
        self._path = str(path)
        self._name = name

        self._cap: Optional[cv2.VideoCapture] = None
        self._native_fps: float = 0.0
        self._total_frames: int = 0
        self._width: int = 0
        self._height: int = 0
        self._codec: str = ""

        self._start: int = 0
        self._delivered: int = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        if self._cap is not None:
            return

        self._cap = cv2.VideoCapture(self._path)
        if not self._cap.isOpened():
            self._cap = None
            raise UnopenableInputError(f"Unable to open input file: {self._path}")

        self._width = int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self._height = int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        self._codec = int_to_codec(self._cap.get(cv2.CAP_PROP_FOURCC))
        self._total_frames = int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT))
        self._native_fps = self._cap.get(cv2.CAP_PROP_FPS)
        self._start = 0
        self._delivered = 0

        logger.debug(
            "VideoFileSource opened: %s  %dx%d @ %.1f fps  %d frames",
            self._path, self._width, self._height, self._native_fps,
            self._total_frames,
        )

    def close(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.debug("VideoFileSource closed: %s", self._path)

    def read(self) -> Optional[Frame]:
        if self._cap is None:
            return None

        ret, image = self._cap.read()
        if not ret or image is None:
            return None

        position = self._start + self._delivered
        ts = position / self._native_fps if self._native_fps else 0.0
        h, w = image.shape[:2]
        frame = Frame(
            image=image,
            timestamp=ts,
            frame_number=self._delivered,
            source_name=f"file:{Path(self._path).name}",
            width=w,
            height=h,
        )
        self._delivered += 1
        return frame

    # ------------------------------------------------------------------
    # Seeking
    # ------------------------------------------------------------------

    def _seek(self, frame_number: int) -> None:
        # Accuracy is whatever the codec offers; keyframe-based streams may
        # land on the nearest preceding keyframe.
        if self._cap is None:
            raise RuntimeError("Source is not open")
        self._cap.set(cv2.CAP_PROP_POS_FRAMES, frame_number)
        self._start = frame_number
        self._delivered = 0

    # ------------------------------------------------------------------
    # FrameSource properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def fps(self) -> float:
        return self._native_fps

    @property
    def resolution(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def codec(self) -> str:
        return self._codec

    @property
    def total_frames(self) -> int:
        return self._total_frames

    @property
    def is_open(self) -> bool:
        return self._cap is not None and self._cap.isOpened()
