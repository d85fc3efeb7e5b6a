"""评论者仓储出站端口"""

from typing import Protocol, runtime_checkable

from ....domain.entities import Commenter


@runtime_checkable
class CommenterRepositoryPort(Protocol):
    """评论者仓储端口（只读）"""

    def get_by_id(self, commenter_id: int) -> Commenter | None:
        """获取评论者，不存在返回None"""
        ...
