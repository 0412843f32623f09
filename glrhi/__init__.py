"""Colours, brushes, 2D cameras, render data records, test-geometry generators and a ruler view model."""

__version__ = "0.1.0"