"""Click-spawned particle bursts driven by 2D matrix transforms."""

__version__ = "0.1.0"
__all__ = ["matrices", "particle", "engine"]