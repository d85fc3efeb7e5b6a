"""作者实体"""

from dataclasses import dataclass


@dataclass
class Author:
    """
    作者

    is_locked 只拦截新文章的创建，已存在的文章不受影响。
    """

    id: int
    name: str = ""
    is_locked: bool = False

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return False
        return self.id == other.id
