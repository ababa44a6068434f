"""Expression trees, one-step evaluation, TeX and Wolfram rendering, and number-theory helpers."""

__version__ = "0.1.0"