"""评论者实体"""

from dataclasses import dataclass


@dataclass
class Commenter:
    """评论者"""

    id: int
    name: str = ""

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commenter):
            return False
        return self.id == other.id
