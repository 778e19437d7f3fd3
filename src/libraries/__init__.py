"""Runtime package for the LevelSpecter toolkit."""

from . import levelspec

__all__ = [
    "__version__",
    "levelspec",
]

__version__ = "1.0.0"
