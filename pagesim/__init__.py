"""Page replacement simulator over memory access traces."""

__version__ = "0.1.0"
__all__ = ["__version__"]