"""Live preview of the composited frames."""

import logging
from abc import ABC, abstractmethod

import cv2
import numpy as np

logger = logging.getLogger(__name__)

ESCAPE_KEY = 27


class FramePreview(ABC):
    """Display capability used by the pipeline.

    The pipeline only ever shows a frame and then asks whether the user
    wants the preview gone; closing it never stops encoding.
    """

    @abstractmethod
    def open(self) -> None:
        """Create the display surface."""

    @abstractmethod
    def display(self, image: np.ndarray) -> None:
        """Show *image*."""

    @abstractmethod
    def poll_cancel(self) -> bool:
        """Return ``True`` when the user asked to close the preview."""

    @abstractmethod
    def close(self) -> None:
        """Tear the display surface down."""

    def __enter__(self) -> "FramePreview":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class WindowPreview(FramePreview):
    """OpenCV HighGUI window, closed with the Escape key.

    Args:
        window_name: Title of the preview window.
        wait_ms: How long each poll waits for a key press.
    """

    def __init__(self, window_name: str = "video", wait_ms: int = 1):
        self.window_name = window_name
        self.wait_ms = wait_ms
        self._open = False

    def open(self) -> None:
        if self._open:
            return
        cv2.startWindowThread()
        cv2.namedWindow(self.window_name, cv2.WINDOW_NORMAL)
        self._open = True
        logger.info("Press [Escape] to close the video preview.")

    def display(self, image: np.ndarray) -> None:
        if self._open:
            cv2.imshow(self.window_name, image)

    def poll_cancel(self) -> bool:
        if not self._open:
            return False
        return cv2.waitKey(self.wait_ms) == ESCAPE_KEY

    def close(self) -> None:
        if not self._open:
            return
        cv2.destroyAllWindows()
        # HighGUI only tears the window down while processing events.
        cv2.waitKey(1)
        self._open = False


class NullPreview(FramePreview):
    """Preview that shows nothing, for headless runs."""

    def open(self) -> None:
        pass

    def display(self, image: np.ndarray) -> None:
        pass

    def poll_cancel(self) -> bool:
        return False

    def close(self) -> None:
        pass
