"""Plotting helpers for interpolants and transform outputs."""

from .plotters import InterpolantVisualizer

__all__ = ["InterpolantVisualizer"]
