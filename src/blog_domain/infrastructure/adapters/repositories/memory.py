"""内存仓储

实现 PostRepositoryPort / AuthorRepositoryPort / CommenterRepositoryPort：
- 存取时都做深拷贝，调用方拿到的是独立副本，必须显式 update 才会落库
- 文章带乐观并发版本号，过期的 update 抛出 ConcurrencyConflictError
- 内部状态由锁保护，可在多线程下共享

适合测试与本地开发。
"""

from __future__ import annotations

import copy
import itertools
import threading
from collections.abc import Iterable

from loguru import logger

from ....domain.entities import Author, Commenter, Post
from ....shared.constants import DEFAULT_POST_ID_START
from ....shared.exceptions import ConcurrencyConflictError, RepositoryError


class InMemoryPostRepository:
    """内存文章仓储，ID 自增"""

    def __init__(self, start_id: int = DEFAULT_POST_ID_START):
        self._posts: dict[int, Post] = {}
        self._ids = itertools.count(start_id)
        self._lock = threading.Lock()

    def get_by_id(self, post_id: int) -> Post | None:
        with self._lock:
            post = self._posts.get(post_id)
            return copy.deepcopy(post) if post is not None else None

    def create_post(self, author_id: int) -> int:
        with self._lock:
            post_id = next(self._ids)
            # 起始ID之下可能已有通过 add() 导入的文章
            while post_id in self._posts:
                post_id = next(self._ids)
            self._posts[post_id] = Post(id=post_id, author_id=author_id)
        logger.debug(f"内存仓储新建文章: {post_id}")
        return post_id

    def update(self, post: Post) -> None:
        with self._lock:
            stored = self._posts.get(post.id)
            if stored is None:
                raise RepositoryError(
                    f"Cannot update unknown post {post.id}", details={"post_id": post.id}
                )

            if stored.version != post.version:
                raise ConcurrencyConflictError(
                    f"Post {post.id} was modified concurrently",
                    details={
                        "post_id": post.id,
                        "expected_version": post.version,
                        "actual_version": stored.version,
                    },
                )

            post.version += 1
            self._posts[post.id] = copy.deepcopy(post)

    def add(self, post: Post) -> None:
        """直接导入一篇文章（测试 / 数据准备）"""
        with self._lock:
            self._posts[post.id] = copy.deepcopy(post)

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)


class InMemoryAuthorRepository:
    """内存作者仓储"""

    def __init__(self, authors: Iterable[Author] = ()):
        self._authors: dict[int, Author] = {a.id: copy.deepcopy(a) for a in authors}
        self._lock = threading.Lock()

    def get_by_id(self, author_id: int) -> Author | None:
        with self._lock:
            author = self._authors.get(author_id)
            return copy.deepcopy(author) if author is not None else None

    def update(self, author: Author) -> None:
        with self._lock:
            if author.id not in self._authors:
                raise RepositoryError(
                    f"Cannot update unknown author {author.id}",
                    details={"author_id": author.id},
                )
            self._authors[author.id] = copy.deepcopy(author)

    def add(self, author: Author) -> None:
        with self._lock:
            self._authors[author.id] = copy.deepcopy(author)


class InMemoryCommenterRepository:
    """内存评论者仓储"""

    def __init__(self, commenters: Iterable[Commenter] = ()):
        self._commenters: dict[int, Commenter] = {c.id: copy.deepcopy(c) for c in commenters}
        self._lock = threading.Lock()

    def get_by_id(self, commenter_id: int) -> Commenter | None:
        with self._lock:
            commenter = self._commenters.get(commenter_id)
            return copy.deepcopy(commenter) if commenter is not None else None

    def add(self, commenter: Commenter) -> None:
        with self._lock:
            self._commenters[commenter.id] = copy.deepcopy(commenter)
