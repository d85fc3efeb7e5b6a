"""仓储适配器"""

from .memory import InMemoryAuthorRepository, InMemoryCommenterRepository, InMemoryPostRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryAuthorRepository",
    "InMemoryCommenterRepository",
]
