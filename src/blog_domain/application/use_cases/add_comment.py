"""添加评论用例"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.entities import Comment
from ...domain.events import CommentAdded
from ...shared.constants import MAX_COMMENT_LENGTH
from ...shared.exceptions import InvalidReferenceError, ValidationError
from ...shared.utils import normalize_text, record_event
from ._loaders import load_post_or_raise

if TYPE_CHECKING:
    from ..ports.outbound import CommenterRepositoryPort, PostRepositoryPort


class AddCommentUseCase:
    """
    添加评论用例

    评论通过聚合根 Post 追加，评论者只以ID引用。
    """

    def __init__(self, commenters: CommenterRepositoryPort, posts: PostRepositoryPort):
        """
        Args:
            commenters: 评论者仓储
            posts: 文章仓储
        """
        self._commenters = commenters
        self._posts = posts

    def execute(self, post_id: int, commenter_id: int, text: str | None) -> int:
        """
        执行添加评论用例

        Args:
            post_id: 文章ID
            commenter_id: 评论者ID
            text: 评论内容

        Returns:
            文章内唯一的评论ID

        Raises:
            ValidationError: 评论为空或过长
            InvalidReferenceError: 评论者不存在
            NotFoundError: 文章不存在
        """
        normalized = normalize_text(text)
        if not normalized:
            raise ValidationError("Comment text is required", details={"post_id": post_id})
        if len(normalized) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment max is {MAX_COMMENT_LENGTH} letters",
                details={"post_id": post_id, "length": len(normalized)},
            )

        if self._commenters.get_by_id(commenter_id) is None:
            logger.warning(f"添加评论失败，评论者不存在: {commenter_id}")
            raise InvalidReferenceError(
                "Commenter Id not found", details={"commenter_id": commenter_id}
            )

        post = load_post_or_raise(self._posts, post_id)

        comment = Comment(
            id=post.next_comment_id(),
            commenter_id=commenter_id,
            text=normalized,
        )
        post.comments.append(comment)
        post.touch()
        self._posts.update(post)

        logger.info(f"评论已添加: 文章 {post_id} / 评论 {comment.id}")
        record_event(
            CommentAdded(post_id=post_id, comment_id=comment.id, commenter_id=commenter_id)
        )
        return comment.id
