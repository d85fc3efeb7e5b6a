"""用例共用的聚合加载辅助"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...shared.exceptions import NotFoundError

if TYPE_CHECKING:
    from ...domain.entities import Post
    from ..ports.outbound import PostRepositoryPort


def load_post_or_raise(posts: PostRepositoryPort, post_id: int) -> Post:
    """加载文章，不存在时抛出 NotFoundError"""
    post = posts.get_by_id(post_id)
    if post is None:
        raise NotFoundError(
            f"Unable to find a post of Id {post_id}",
            details={"post_id": post_id},
        )
    return post
