"""增加文章浏览数用例"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.events import PostViewed
from ...shared.utils import record_event
from ._loaders import load_post_or_raise

if TYPE_CHECKING:
    from ..ports.outbound import PostRepositoryPort


class IncrementViewCountUseCase:
    """增加文章浏览数用例"""

    def __init__(self, posts: PostRepositoryPort):
        self._posts = posts

    def execute(self, post_id: int) -> int:
        """
        Returns:
            新的浏览数

        Raises:
            NotFoundError: 文章不存在
        """
        post = load_post_or_raise(self._posts, post_id)

        post.view_count += 1
        self._posts.update(post)

        logger.debug(f"文章 {post_id} 浏览数: {post.view_count}")
        record_event(PostViewed(post_id=post_id, view_count=post.view_count))
        return post.view_count
