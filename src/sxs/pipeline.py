"""The side-by-side run: open inputs, splice frame pairs, write the output."""

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Callable, Optional

from sxs.codec import codec_to_int
from sxs.compositor import SideBySideCompositor, negotiate_geometry
from sxs.errors import FrameReadError
from sxs.sinks import FramePreview, NullPreview, VideoWriterSink, WindowPreview
from sxs.sources import FrameSource, VideoFileSource
from sxs.utils.config import SxsConfig

logger = logging.getLogger(__name__)

SourceFactory = Callable[[str, str], FrameSource]
SinkFactory = Callable[[str, int, float, tuple[int, int]], VideoWriterSink]


@dataclass
class RunSummary:
    """Outcome of a completed run."""
    output_path: str
    frames_written: int
    frame_size: tuple[int, int]
    fps: float
    channels: Optional[int]
    preview_closed: bool = False


def _open_source(
    stack: ExitStack, factory: SourceFactory, path: str, name: str
) -> FrameSource:
    source = factory(path, name)
    stack.enter_context(source)
    logger.info("Input %s:\n%s", name.lower(), source.describe())
    return source


def _seek_start(source: FrameSource, start: int) -> None:
    source.seek(start)
    logger.info("Starting %s from frame: %d", source.name.lower(), start)


def run_side_by_side(
    config: SxsConfig,
    preview: Optional[FramePreview] = None,
    source_factory: SourceFactory = VideoFileSource,
    sink_factory: SinkFactory = VideoWriterSink,
) -> RunSummary:
    """Composite two videos side by side into ``config.output``.

    Video 1 supplies the left half of every output frame and video 2 the
    right half, with a one-pixel white divider. The run lasts exactly
    ``min(frames1 - start1, frames2 - start2)`` frames.

    Args:
        config: Run configuration.
        preview: Display to show frames on.  Defaults to a
            :class:`WindowPreview` when ``config.preview`` is set, otherwise
            a :class:`NullPreview`.
        source_factory: Builds a source from ``(path, name)``.
        sink_factory: Builds the output from ``(path, fourcc, fps, size)``.

    Returns:
        A :class:`RunSummary` of what was written.

    Raises:
        SxsError: on any validation failure.  All handles are released
            before the error propagates.
    """
    if preview is None:
        preview = WindowPreview() if config.preview else NullPreview()

    with ExitStack() as stack:
        source1 = _open_source(
            stack, source_factory, config.require("input1"), "Video 1"
        )
        source2 = _open_source(
            stack, source_factory, config.require("input2"), "Video 2"
        )
        output_path = config.require("output")

        geometry = negotiate_geometry(
            source1.resolution, source1.fps,
            source2.resolution, source2.fps,
            adapt_first=config.adapt_first,
        )
        if geometry.resize_required:
            logger.info(
                "Resizing video %d to %dx%d",
                1 if geometry.adapt_first else 2,
                geometry.width, geometry.height,
            )

        _seek_start(source1, config.input1_start_frame)
        _seek_start(source2, config.input2_start_frame)

        sink = sink_factory(
            output_path,
            codec_to_int(config.fourcc_codec),
            geometry.fps,
            geometry.frame_size,
        )
        stack.enter_context(sink)

        min_frames = min(
            source1.total_frames - config.input1_start_frame,
            source2.total_frames - config.input2_start_frame,
        )
        compositor = SideBySideCompositor(geometry)

        preview_active = True
        preview_closed = False
        preview.open()
        stack.callback(preview.close)

        for i in range(min_frames):
            frame1 = source1.read()
            frame2 = source2.read()
            for source, frame in ((source1, frame1), (source2, frame2)):
                if frame is None:
                    raise FrameReadError(
                        f"{source.name} produced no frame at output frame "
                        f"{i + 1}/{min_frames}"
                    )

            image = compositor.compose(frame1.image, frame2.image)
            sink.write(image)

            if (
                i + 1 == min_frames
                or (config.progress_interval and (i + 1) % config.progress_interval == 0)
            ):
                logger.info("Video Frame: %d/%d", i + 1, min_frames)

            if preview_active:
                preview.display(image)
                if preview.poll_cancel():
                    logger.info("Closing preview window.")
                    preview.close()
                    preview_active = False
                    preview_closed = True

        logger.info("Wrote output to: %s", output_path)
        return RunSummary(
            output_path=output_path,
            frames_written=sink.frames_written,
            frame_size=geometry.frame_size,
            fps=geometry.fps,
            channels=compositor.channels,
            preview_closed=preview_closed,
        )
