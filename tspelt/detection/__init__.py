"""Change point search engines."""

from .pelt import Pelt, PeltPath

__all__ = ["Pelt", "PeltPath"]
