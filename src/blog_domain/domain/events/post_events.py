"""文章领域事件"""

from dataclasses import dataclass, field
from datetime import datetime

from ...shared.utils import utc_now


@dataclass(frozen=True)
class DomainEvent:
    """领域事件基类"""

    # init=False 以避免子类新增非默认字段时触发 dataclass 参数顺序限制
    occurred_at: datetime = field(default_factory=utc_now, init=False)


@dataclass(frozen=True)
class PostCreated(DomainEvent):
    """文章创建事件"""

    post_id: int
    author_id: int


@dataclass(frozen=True)
class PostTitleUpdated(DomainEvent):
    """文章标题更新事件"""

    post_id: int
    title_length: int


@dataclass(frozen=True)
class PostContentUpdated(DomainEvent):
    """文章正文更新事件"""

    post_id: int
    content_length: int


@dataclass(frozen=True)
class CommentAdded(DomainEvent):
    """评论添加事件"""

    post_id: int
    comment_id: int
    commenter_id: int


@dataclass(frozen=True)
class PostTagged(DomainEvent):
    """文章打标签事件"""

    post_id: int
    tag: str


@dataclass(frozen=True)
class AuthorLockChanged(DomainEvent):
    """作者锁定状态变更事件"""

    author_id: int
    is_locked: bool


@dataclass(frozen=True)
class PostViewed(DomainEvent):
    """文章浏览事件"""

    post_id: int
    view_count: int
