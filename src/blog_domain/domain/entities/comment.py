"""评论实体"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ...shared.utils import utc_now


@dataclass
class Comment:
    """
    评论

    ID 仅在所属文章内唯一；评论者以 commenter_id 引用。
    """

    id: int
    commenter_id: int
    text: str
    created_date: datetime = field(default_factory=utc_now)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comment):
            return False
        return self.id == other.id
