"""Terminal snake game with levels, obstacles and power-up food."""

__version__ = "1.0.0"
