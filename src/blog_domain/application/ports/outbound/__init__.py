"""出站端口 - 定义应用层依赖的仓储接口"""

from .author_repository import AuthorRepositoryPort
from .commenter_repository import CommenterRepositoryPort
from .post_repository import PostRepositoryPort

__all__ = [
    "PostRepositoryPort",
    "AuthorRepositoryPort",
    "CommenterRepositoryPort",
]
