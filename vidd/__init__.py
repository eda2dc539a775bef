"""Line chains, buffers, selections, styles, frame buffers, file and search helpers for a terminal text editor."""

__version__ = "0.1.0"