"""适配器"""

from .repositories import (
    InMemoryAuthorRepository,
    InMemoryCommenterRepository,
    InMemoryPostRepository,
)

__all__ = [
    "InMemoryPostRepository",
    "InMemoryAuthorRepository",
    "InMemoryCommenterRepository",
]
