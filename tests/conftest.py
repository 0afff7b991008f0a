"""Pytest configuration for video-sxs tests."""

from pathlib import Path

import cv2
import numpy as np
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "video: test encodes real video files with OpenCV"
    )


def write_video(
    path: Path,
    colors,
    size: tuple[int, int] = (64, 48),
    fps: float = 30.0,
) -> Path:
    """Write one solid-colour MJPG frame per entry of *colors*.

    Skips the calling test when this OpenCV build cannot encode MJPG.
    """
    width, height = size
    writer = cv2.VideoWriter(
        str(path), cv2.VideoWriter_fourcc(*"MJPG"), fps, (width, height)
    )
    if not writer.isOpened():
        pytest.skip("OpenCV build cannot encode MJPG/AVI")
    try:
        for color in colors:
            writer.write(np.full((height, width, 3), color, dtype=np.uint8))
    finally:
        writer.release()
    return path


@pytest.fixture
def make_video(tmp_path):
    """Factory fixture: ``make_video(name, n_frames, size, color, fps)``."""

    def _make(
        name: str,
        n_frames: int,
        size: tuple[int, int] = (64, 48),
        color=(0, 0, 255),
        fps: float = 30.0,
    ) -> Path:
        return write_video(tmp_path / name, [color] * n_frames, size, fps)

    return _make
