"""文章聚合根实体 - DDD核心"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from ...shared.constants import DEFAULT_TITLE
from ...shared.utils import utc_now

if TYPE_CHECKING:
    from ..value_objects import Tag
    from .comment import Comment


@dataclass
class Post:
    """
    文章聚合根

    Comment 与 Tag 归文章所有，生命周期绑定在文章上，
    所有对它们的访问都必须经过文章。
    作者只以 author_id 引用，不归文章所有。

    实体只承载数据，业务规则集中在各用例中。
    """

    id: int
    author_id: int
    title: str = DEFAULT_TITLE
    content: str = ""

    created_date: datetime = field(default_factory=utc_now)
    updated_date: datetime = field(default_factory=utc_now)

    # 聚合内部成员
    comments: list[Comment] = field(default_factory=list)
    tags: set[Tag] = field(default_factory=set)

    view_count: int = 0

    # 乐观并发版本号，由仓储维护
    version: int = 0

    @property
    def comment_count(self) -> int:
        """评论数"""
        return len(self.comments)

    @property
    def is_draft(self) -> bool:
        """尚未设置标题"""
        return not self.title

    @property
    def tag_names(self) -> list[str]:
        """按名称排序的标签列表"""
        return sorted(tag.name for tag in self.tags)

    def next_comment_id(self) -> int:
        """文章内唯一的下一个评论ID"""
        if not self.comments:
            return 1
        return max(comment.id for comment in self.comments) + 1

    def touch(self) -> None:
        """刷新修改时间"""
        self.updated_date = utc_now()

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Post):
            return False
        return self.id == other.id
