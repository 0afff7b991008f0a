"""video-sxs - side-by-side video comparison.

Writes a video whose left half comes from one input and right half from
another, split by a one-pixel white divider.
"""

__version__ = "0.1.0"
