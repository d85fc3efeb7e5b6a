"""领域事件

事件仅用于日志 / 追踪（见 shared.utils.record_event），没有事件总线。
"""

from .post_events import (
    AuthorLockChanged,
    CommentAdded,
    DomainEvent,
    PostContentUpdated,
    PostCreated,
    PostTagged,
    PostTitleUpdated,
    PostViewed,
)

__all__ = [
    "DomainEvent",
    "PostCreated",
    "PostTitleUpdated",
    "PostContentUpdated",
    "CommentAdded",
    "PostTagged",
    "AuthorLockChanged",
    "PostViewed",
]
