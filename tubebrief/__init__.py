"""TubeBrief — subscription-gated YouTube transcript analysis dashboard."""

__version__ = "0.1.0"
