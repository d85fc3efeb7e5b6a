"""
领域层 - DDD核心

领域层包含：
- entities: 领域实体（聚合根 Post，以及 Author、Comment、Commenter）
- value_objects: 值对象（Tag）
- events: 领域事件

依赖规则：领域层不依赖任何外部层
"""

from .entities import Author, Comment, Commenter, Post
from .value_objects import Tag

__all__ = [
    # Entities
    "Post",
    "Author",
    "Comment",
    "Commenter",
    # Value Objects
    "Tag",
]
