"""Aperiodic tile outlines, simple tilings, SVG output and helper tools."""

__version__ = "0.1.0"