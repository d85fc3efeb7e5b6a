"""更新文章正文用例"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.events import PostContentUpdated
from ...shared.utils import normalize_text, record_event
from ._loaders import load_post_or_raise

if TYPE_CHECKING:
    from ..ports.outbound import PostRepositoryPort


class UpdateContentUseCase:
    """更新文章正文用例，缺失值视为空字符串"""

    def __init__(self, posts: PostRepositoryPort):
        self._posts = posts

    def execute(self, post_id: int, content: str | None = None) -> None:
        """
        Raises:
            NotFoundError: 文章不存在
        """
        normalized = normalize_text(content)

        post = load_post_or_raise(self._posts, post_id)

        post.content = normalized
        post.touch()
        self._posts.update(post)

        logger.info(f"文章正文已更新: {post_id} ({len(normalized)} 字符)")
        record_event(PostContentUpdated(post_id=post_id, content_length=len(normalized)))
