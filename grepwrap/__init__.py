"""grep-wrapper: reformat and highlight grep-like diagnostic lines."""

__version__ = "1.0"
