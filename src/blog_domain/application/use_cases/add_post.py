"""新建文章用例"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.events import PostCreated
from ...shared.exceptions import InvalidReferenceError, InvalidStateError
from ...shared.utils import record_event

if TYPE_CHECKING:
    from ..ports.outbound import AuthorRepositoryPort, PostRepositoryPort


class AddPostUseCase:
    """
    新建文章用例

    为一个存在且未锁定的作者创建空文章（草稿，无标题）。
    """

    def __init__(self, authors: AuthorRepositoryPort, posts: PostRepositoryPort):
        """
        Args:
            authors: 作者仓储
            posts: 文章仓储
        """
        self._authors = authors
        self._posts = posts

    def execute(self, author_id: int) -> int:
        """
        执行新建文章用例

        Args:
            author_id: 作者ID

        Returns:
            新文章ID

        Raises:
            InvalidReferenceError: 作者不存在
            InvalidStateError: 作者已锁定
        """
        author = self._authors.get_by_id(author_id)
        if author is None:
            logger.warning(f"新建文章失败，作者不存在: {author_id}")
            raise InvalidReferenceError(
                "Author Id not found", details={"author_id": author_id}
            )

        if author.is_locked:
            logger.warning(f"新建文章失败，作者已锁定: {author_id}")
            raise InvalidStateError("Author is locked", details={"author_id": author_id})

        post_id = self._posts.create_post(author_id)

        logger.info(f"文章已创建: {post_id} (作者: {author_id})")
        record_event(PostCreated(post_id=post_id, author_id=author_id))
        return post_id
