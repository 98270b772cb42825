"""Split files into numbered block files and join them back."""

__version__ = "0.1.0"
__all__ = ["blocks", "splitter", "cli"]