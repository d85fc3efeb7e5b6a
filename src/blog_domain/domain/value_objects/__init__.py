"""值对象"""

from .tag import Tag

__all__ = ["Tag"]
