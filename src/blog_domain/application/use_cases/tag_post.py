"""文章打标签用例"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.events import PostTagged
from ...domain.value_objects import Tag
from ...shared.constants import MAX_TAGS_PER_POST
from ...shared.exceptions import InvalidStateError
from ...shared.utils import record_event
from ._loaders import load_post_or_raise

if TYPE_CHECKING:
    from ..ports.outbound import PostRepositoryPort


class TagPostUseCase:
    """
    文章打标签用例

    标签是值对象，同名标签视为同一个；重复添加不产生写入。
    """

    def __init__(self, posts: PostRepositoryPort):
        self._posts = posts

    def execute(self, post_id: int, tag_name: str | None) -> bool:
        """
        执行打标签用例

        Args:
            post_id: 文章ID
            tag_name: 标签名称

        Returns:
            是否新增了标签（已存在返回 False）

        Raises:
            ValidationError: 标签名称无效
            NotFoundError: 文章不存在
            InvalidStateError: 标签数量已达上限
        """
        tag = Tag.from_string(tag_name)

        post = load_post_or_raise(self._posts, post_id)

        if tag in post.tags:
            logger.debug(f"文章 {post_id} 已有标签: {tag}")
            return False

        if len(post.tags) >= MAX_TAGS_PER_POST:
            raise InvalidStateError(
                "Post tag limit reached",
                details={"post_id": post_id, "limit": MAX_TAGS_PER_POST},
            )

        post.tags.add(tag)
        post.touch()
        self._posts.update(post)

        logger.info(f"文章 {post_id} 添加标签: {tag}")
        record_event(PostTagged(post_id=post_id, tag=tag.name))
        return True
