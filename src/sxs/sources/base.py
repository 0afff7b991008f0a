"""Abstract base class for video-sxs frame sources."""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from sxs.errors import StartFrameRangeError
from sxs.sources.frame import Frame


class FrameSource(ABC):
    """Uniform interface for the decoded inputs of a side-by-side run.

    Sources are finite and seekable: the pipeline needs the frame count
    up-front to size the run, and a start offset before the first read.

    Usage::

        with VideoFileSource("left.mp4", name="Video 1") as src:
            src.seek(10)
            for frame in src:
                ...
    """

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @abstractmethod
    def open(self) -> None:
        """Open the underlying capture handle and read its metadata."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying capture handle."""

    @abstractmethod
    def read(self) -> Optional[Frame]:
        """Read the next frame.

        Returns:
            A :class:`Frame`, or ``None`` when no frame could be decoded.
        """

    def seek(self, frame_number: int) -> None:
        """Position the read cursor so the next :meth:`read` starts there.

        Raises:
            StartFrameRangeError: if *frame_number* is not in
                ``[0, total_frames)``.
        """
        if frame_number < 0 or frame_number >= self.total_frames:
            raise StartFrameRangeError(
                f"{self.name} start frame {frame_number} ought to be in "
                f"range [0, {self.total_frames})"
            )
        self._seek(frame_number)

    @abstractmethod
    def _seek(self, frame_number: int) -> None:
        """Move to a frame already checked to be in range."""

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Label used in log lines and error messages (``"Video 1"``)."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Location the source reads from."""

    @property
    @abstractmethod
    def fps(self) -> float:
        """Native frames per second."""

    @property
    @abstractmethod
    def resolution(self) -> tuple[int, int]:
        """``(width, height)`` of the frames produced by this source."""

    @property
    @abstractmethod
    def codec(self) -> str:
        """Four-character codec tag of the input stream."""

    @property
    @abstractmethod
    def total_frames(self) -> int:
        """Total number of frames reported by the container."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """``True`` when the source has been opened and not yet closed."""

    @property
    def duration(self) -> float:
        """Duration of the video in seconds (0 when the FPS is unknown)."""
        if self.fps:
            return self.total_frames / self.fps
        return 0.0

    def describe(self) -> str:
        """Multi-line metadata summary used in the run log."""
        width, height = self.resolution
        return (
            f"\t\tPath:\t{self.path}\n"
            f"\t\tWidth:\t{width}\n"
            f"\t\tHeight:\t{height}\n"
            f"\t\tCodec:\t{self.codec}\n"
            f"\t\tFPS:\t{self.fps:f}\n"
            f"\t\tFrames:\t{self.total_frames}\n"
            f"\t\tDuration:\t{self.duration:f} seconds"
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "FrameSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Frame]:
        return self

    def __next__(self) -> Frame:
        frame = self.read()
        if frame is None:
            raise StopIteration
        return frame
