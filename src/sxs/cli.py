#!/usr/bin/env python3
"""
Side-by-side video compositor - command line entry point

Run with:
    video-sxs --input1 left.mp4 --input2 right.mp4 --output sxs.mp4

Or as a module:
    python -m sxs.cli --config runs/compare.yaml --no_preview
"""

import argparse
import logging
from typing import Any, Dict, Optional, Sequence

from sxs import __version__
from sxs.pipeline import RunSummary, run_side_by_side
from sxs.utils.config import load_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="video-sxs",
        description="Composite two videos side by side: left half from the "
                    "first, right half from the second.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare two renders, skipping the first 10 frames of the second
  video-sxs --input1 a.mp4 --input2 b.mp4 --input2_start_frame 10 --output ab.mp4

  # Resize the first video to the second and encode as MJPG without preview
  video-sxs --input1 a.avi --input2 b.avi --adapt_first \\
      --fourcc_codec mjpg --output ab.avi --no_preview

  # Take everything from a YAML file
  video-sxs --config runs/compare.yaml
        """
    )
    # Defaults of None mean "not given" so YAML values are not overridden.
    parser.add_argument("--input1", help="First video.")
    parser.add_argument("--input2", help="Second video.")
    parser.add_argument(
        "--input1_start_frame", type=int,
        help="Frame to start first video from (default: 0)"
    )
    parser.add_argument(
        "--input2_start_frame", type=int,
        help="Frame to start second video from (default: 0)"
    )
    parser.add_argument(
        "--adapt_first", action=argparse.BooleanOptionalAction, default=None,
        help="Change size/aspect ratio of the first video instead of the "
             "second. --no-adapt_first overrides a YAML setting."
    )
    parser.add_argument("--output", help="Output file.")
    parser.add_argument(
        "--fourcc_codec",
        help="FourCC codec identifier (default: h264)"
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file"
    )
    parser.add_argument(
        "--no_preview", dest="preview", action="store_false", default=None,
        help="Do not open the live preview window"
    )
    parser.add_argument(
        "--progress_interval", type=int,
        help="Log progress every N frames (default: 30)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Turn the flags that were actually given into config overrides."""
    overrides = {
        key: value
        for key, value in vars(args).items()
        if key not in ("config", "verbose") and value is not None
    }
    if args.verbose:
        overrides["logging.level"] = "DEBUG"
    return overrides


def main(argv: Optional[Sequence[str]] = None) -> RunSummary:
    """Parse *argv*, load the configuration and run the compositor."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config, overrides=args_to_overrides(args))

    summary = run_side_by_side(config)
    logger.info(
        "Done: %d frames, %dx%d @ %.2f fps -> %s",
        summary.frames_written, summary.frame_size[0], summary.frame_size[1],
        summary.fps, summary.output_path,
    )
    return summary


def run_cli() -> None:
    """CLI entry point."""
    main()


if __name__ == "__main__":
    run_cli()
