"""锁定 / 解锁作者用例

锁定只阻止该作者后续的新建文章，不会改变已存在的文章。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ...domain.events import AuthorLockChanged
from ...shared.exceptions import NotFoundError
from ...shared.utils import record_event

if TYPE_CHECKING:
    from ..ports.outbound import AuthorRepositoryPort


def _set_lock(authors: AuthorRepositoryPort, author_id: int, locked: bool) -> None:
    author = authors.get_by_id(author_id)
    if author is None:
        raise NotFoundError(
            f"Unable to find an author of Id {author_id}",
            details={"author_id": author_id},
        )

    if author.is_locked == locked:
        logger.debug(f"作者 {author_id} 锁定状态未变化: {locked}")
        return

    author.is_locked = locked
    authors.update(author)

    logger.info(f"作者 {author_id} {'已锁定' if locked else '已解锁'}")
    record_event(AuthorLockChanged(author_id=author_id, is_locked=locked))


class LockAuthorUseCase:
    """锁定作者用例"""

    def __init__(self, authors: AuthorRepositoryPort):
        self._authors = authors

    def execute(self, author_id: int) -> None:
        """
        Raises:
            NotFoundError: 作者不存在
        """
        _set_lock(self._authors, author_id, locked=True)


class UnlockAuthorUseCase:
    """解锁作者用例"""

    def __init__(self, authors: AuthorRepositoryPort):
        self._authors = authors

    def execute(self, author_id: int) -> None:
        """
        Raises:
            NotFoundError: 作者不存在
        """
        _set_lock(self._authors, author_id, locked=False)
