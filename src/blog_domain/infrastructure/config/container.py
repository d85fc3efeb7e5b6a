"""依赖注入容器 - 组装应用组件

容器是传输层的组合根：仓储在这里创建，并显式注入到用例的构造函数中。
用例本身从不访问容器。
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from ...application.use_cases import (
    AddCommentUseCase,
    AddPostUseCase,
    IncrementViewCountUseCase,
    LockAuthorUseCase,
    TagPostUseCase,
    UnlockAuthorUseCase,
    UpdateContentUseCase,
    UpdateTitleUseCase,
)
from ...shared.exceptions import ConfigError
from ...shared.utils import setup_logger
from .settings import AppSettings, get_settings

if TYPE_CHECKING:
    from ...application.ports.outbound import (
        AuthorRepositoryPort,
        CommenterRepositoryPort,
        PostRepositoryPort,
    )


@dataclass
class Container:
    """
    依赖注入容器

    懒加载仓储与用例。用例无状态，整个容器生命周期内复用同一实例。
    """

    settings: AppSettings = field(default_factory=get_settings)

    # 可重入锁：用例属性在持锁时还会访问仓储属性
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    # 仓储缓存
    _posts: PostRepositoryPort | None = field(default=None, init=False)
    _authors: AuthorRepositoryPort | None = field(default=None, init=False)
    _commenters: CommenterRepositoryPort | None = field(default=None, init=False)

    # 用例缓存
    _add_post_use_case: AddPostUseCase | None = field(default=None, init=False)
    _update_title_use_case: UpdateTitleUseCase | None = field(default=None, init=False)
    _update_content_use_case: UpdateContentUseCase | None = field(default=None, init=False)
    _add_comment_use_case: AddCommentUseCase | None = field(default=None, init=False)
    _tag_post_use_case: TagPostUseCase | None = field(default=None, init=False)
    _lock_author_use_case: LockAuthorUseCase | None = field(default=None, init=False)
    _unlock_author_use_case: UnlockAuthorUseCase | None = field(default=None, init=False)
    _increment_view_count_use_case: IncrementViewCountUseCase | None = field(
        default=None, init=False
    )

    # ---------- 仓储 ----------

    @property
    def posts(self) -> PostRepositoryPort:
        """获取文章仓储"""
        if self._posts is None:
            with self._lock:
                if self._posts is None:
                    self._create_repositories()
        assert self._posts is not None
        return self._posts

    @property
    def authors(self) -> AuthorRepositoryPort:
        """获取作者仓储"""
        if self._authors is None:
            with self._lock:
                if self._authors is None:
                    self._create_repositories()
        assert self._authors is not None
        return self._authors

    @property
    def commenters(self) -> CommenterRepositoryPort:
        """获取评论者仓储"""
        if self._commenters is None:
            with self._lock:
                if self._commenters is None:
                    self._create_repositories()
        assert self._commenters is not None
        return self._commenters

    # ---------- 用例 ----------

    @property
    def add_post_use_case(self) -> AddPostUseCase:
        """获取新建文章用例"""
        if self._add_post_use_case is None:
            with self._lock:
                if self._add_post_use_case is None:
                    self._add_post_use_case = AddPostUseCase(self.authors, self.posts)
        return self._add_post_use_case

    @property
    def update_title_use_case(self) -> UpdateTitleUseCase:
        """获取更新标题用例"""
        if self._update_title_use_case is None:
            with self._lock:
                if self._update_title_use_case is None:
                    self._update_title_use_case = UpdateTitleUseCase(self.posts)
        return self._update_title_use_case

    @property
    def update_content_use_case(self) -> UpdateContentUseCase:
        """获取更新正文用例"""
        if self._update_content_use_case is None:
            with self._lock:
                if self._update_content_use_case is None:
                    self._update_content_use_case = UpdateContentUseCase(self.posts)
        return self._update_content_use_case

    @property
    def add_comment_use_case(self) -> AddCommentUseCase:
        """获取添加评论用例"""
        if self._add_comment_use_case is None:
            with self._lock:
                if self._add_comment_use_case is None:
                    self._add_comment_use_case = AddCommentUseCase(self.commenters, self.posts)
        return self._add_comment_use_case

    @property
    def tag_post_use_case(self) -> TagPostUseCase:
        """获取打标签用例"""
        if self._tag_post_use_case is None:
            with self._lock:
                if self._tag_post_use_case is None:
                    self._tag_post_use_case = TagPostUseCase(self.posts)
        return self._tag_post_use_case

    @property
    def lock_author_use_case(self) -> LockAuthorUseCase:
        """获取锁定作者用例"""
        if self._lock_author_use_case is None:
            with self._lock:
                if self._lock_author_use_case is None:
                    self._lock_author_use_case = LockAuthorUseCase(self.authors)
        return self._lock_author_use_case

    @property
    def unlock_author_use_case(self) -> UnlockAuthorUseCase:
        """获取解锁作者用例"""
        if self._unlock_author_use_case is None:
            with self._lock:
                if self._unlock_author_use_case is None:
                    self._unlock_author_use_case = UnlockAuthorUseCase(self.authors)
        return self._unlock_author_use_case

    @property
    def increment_view_count_use_case(self) -> IncrementViewCountUseCase:
        """获取增加浏览数用例"""
        if self._increment_view_count_use_case is None:
            with self._lock:
                if self._increment_view_count_use_case is None:
                    self._increment_view_count_use_case = IncrementViewCountUseCase(self.posts)
        return self._increment_view_count_use_case

    def configure_logging(self) -> None:
        """按配置初始化日志"""
        setup_logger(
            level=self.settings.effective_log_level,
            log_to_file=self.settings.log_to_file,
            log_dir=self.settings.log_dir,
            json_format=self.settings.log_json,
        )

    def _create_repositories(self) -> None:
        """按配置创建仓储"""
        backend = self.settings.repository.backend
        if backend != "memory":
            raise ConfigError(f"Unsupported repository backend: {backend}")

        from ..adapters.repositories import (
            InMemoryAuthorRepository,
            InMemoryCommenterRepository,
            InMemoryPostRepository,
        )

        self._posts = InMemoryPostRepository(start_id=self.settings.repository.post_id_start)
        self._authors = InMemoryAuthorRepository()
        self._commenters = InMemoryCommenterRepository()
        logger.debug(f"仓储已创建: {backend}")


# 全局容器实例
_container: Container | None = None


def get_container() -> Container:
    """获取全局容器实例"""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """重置容器（用于测试）"""
    global _container
    _container = None
