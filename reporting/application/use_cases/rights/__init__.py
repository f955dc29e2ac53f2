"""Right-related use cases."""

from .create_right import create_right

__all__ = ["create_right"]
