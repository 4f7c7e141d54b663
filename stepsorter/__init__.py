"""Step-by-step sorting visualizer: one comparison or swap per frame."""

__version__ = "1.0.0"
