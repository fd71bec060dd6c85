"""An endless side-scrolling runner game built on pygame."""

__version__ = "0.1.0"