"""更新文章标题用例"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.events import PostTitleUpdated
from ...shared.constants import MAX_TITLE_LENGTH
from ...shared.exceptions import ValidationError
from ...shared.utils import normalize_text, record_event
from ._loaders import load_post_or_raise

if TYPE_CHECKING:
    from ..ports.outbound import PostRepositoryPort


class UpdateTitleUseCase:
    """
    更新文章标题用例

    标题缺失视为空字符串，去除首尾空白后长度不得超过 90。
    长度校验不依赖文章状态，因此在加载文章之前完成。
    重复以相同标题调用得到相同的最终状态。
    """

    def __init__(self, posts: PostRepositoryPort):
        self._posts = posts

    def execute(self, post_id: int, title: str | None = None) -> None:
        """
        执行更新标题用例

        Args:
            post_id: 文章ID
            title: 新标题，None 视为空字符串

        Raises:
            ValidationError: 标题过长
            NotFoundError: 文章不存在
        """
        normalized = normalize_text(title)
        if len(normalized) > MAX_TITLE_LENGTH:
            logger.warning(f"标题过长 ({len(normalized)} 字符)，文章: {post_id}")
            raise ValidationError(
                f"Title max is {MAX_TITLE_LENGTH} letters",
                details={"post_id": post_id, "length": len(normalized)},
            )

        post = load_post_or_raise(self._posts, post_id)

        post.title = normalized
        post.touch()
        self._posts.update(post)

        logger.info(f"文章标题已更新: {post_id}")
        record_event(PostTitleUpdated(post_id=post_id, title_length=len(normalized)))
