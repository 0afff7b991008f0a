"""Tests for the preview implementations."""

import numpy as np

from sxs.sinks import preview as preview_mod
from sxs.sinks.preview import ESCAPE_KEY, NullPreview, WindowPreview


class TestNullPreview:
    def test_never_cancels(self):
        with NullPreview() as preview:
            preview.display(np.zeros((2, 2, 3), np.uint8))
            assert preview.poll_cancel() is False


class _FakeHighGui:
    """Records HighGUI calls instead of opening windows."""

    WINDOW_NORMAL = 0

    def __init__(self, keys):
        self.keys = list(keys)
        self.calls = []

    def startWindowThread(self):
        self.calls.append("startWindowThread")

    def namedWindow(self, name, flags):
        self.calls.append(("namedWindow", name))

    def imshow(self, name, image):
        self.calls.append(("imshow", name))

    def waitKey(self, delay):
        self.calls.append(("waitKey", delay))
        return self.keys.pop(0) if self.keys else -1

    def destroyAllWindows(self):
        self.calls.append("destroyAllWindows")


class TestWindowPreview:
    def test_escape_cancels(self, monkeypatch):
        fake = _FakeHighGui(keys=[-1, ESCAPE_KEY])
        monkeypatch.setattr(preview_mod, "cv2", fake)

        preview = WindowPreview(window_name="sxs")
        preview.open()
        image = np.zeros((2, 2, 3), np.uint8)
        preview.display(image)
        assert preview.poll_cancel() is False
        preview.display(image)
        assert preview.poll_cancel() is True
        preview.close()

        assert fake.calls[:2] == ["startWindowThread", ("namedWindow", "sxs")]
        assert ("imshow", "sxs") in fake.calls
        assert ("waitKey", 1) in fake.calls
        assert "destroyAllWindows" in fake.calls

    def test_close_is_idempotent(self, monkeypatch):
        fake = _FakeHighGui(keys=[])
        monkeypatch.setattr(preview_mod, "cv2", fake)

        preview = WindowPreview()
        preview.open()
        preview.close()
        preview.close()
        assert fake.calls.count("destroyAllWindows") == 1

    def test_display_after_close_is_ignored(self, monkeypatch):
        fake = _FakeHighGui(keys=[])
        monkeypatch.setattr(preview_mod, "cv2", fake)

        preview = WindowPreview()
        preview.display(np.zeros((2, 2, 3), np.uint8))
        assert preview.poll_cancel() is False
        assert fake.calls == []
