"""作者仓储出站端口"""

from typing import Protocol, runtime_checkable

from ....domain.entities import Author


@runtime_checkable
class AuthorRepositoryPort(Protocol):
    """作者仓储端口"""

    def get_by_id(self, author_id: int) -> Author | None:
        """
        获取作者

        Args:
            author_id: 作者ID

        Returns:
            作者实体，不存在返回None
        """
        ...

    def update(self, author: Author) -> None:
        """
        保存作者状态

        Args:
            author: 作者实体
        """
        ...
