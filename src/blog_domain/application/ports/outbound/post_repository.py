"""文章仓储出站端口 - 定义存储适配器必须实现的接口"""

from typing import Protocol, runtime_checkable

from ....domain.entities import Post


@runtime_checkable
class PostRepositoryPort(Protocol):
    """
    文章仓储端口

    负责 Post 聚合（含其评论与标签）的加载与持久化。
    仓储不做任何业务校验，所有规则都在用例中。
    """

    def get_by_id(self, post_id: int) -> Post | None:
        """
        获取文章

        Args:
            post_id: 文章ID

        Returns:
            文章实体，不存在返回None

        Raises:
            InfrastructureError: 存储访问失败
        """
        ...

    def create_post(self, author_id: int) -> int:
        """
        创建绑定到作者的空文章

        ID 的生成策略（自增、UUID 等）由实现决定。

        Args:
            author_id: 作者ID

        Returns:
            新文章ID

        Raises:
            InfrastructureError: 存储访问失败
        """
        ...

    def update(self, post: Post) -> None:
        """
        保存文章的全部状态

        Args:
            post: 文章实体

        Raises:
            ConcurrencyConflictError: 实体版本已过期（实现支持时）
            InfrastructureError: 存储访问失败
        """
        ...
