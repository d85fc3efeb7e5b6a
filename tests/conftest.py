"""测试夹具和共享配置

提供测试中常用的夹具：
- 示例 Author、Commenter、Post 实体
- 预置数据的内存仓储
- Mock 仓储（用于验证调用与异常传播）
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from blog_domain.domain.entities import Author, Commenter, Post
from blog_domain.infrastructure.adapters.repositories import (
    InMemoryAuthorRepository,
    InMemoryCommenterRepository,
    InMemoryPostRepository,
)

UNLOCKED_AUTHOR_ID = 1
LOCKED_AUTHOR_ID = 2
COMMENTER_ID = 7


# ============== 基础夹具 ==============


@pytest.fixture
def unlocked_author() -> Author:
    """未锁定作者"""
    return Author(id=UNLOCKED_AUTHOR_ID, name="Ada")


@pytest.fixture
def locked_author() -> Author:
    """已锁定作者"""
    return Author(id=LOCKED_AUTHOR_ID, name="Bob", is_locked=True)


@pytest.fixture
def commenter() -> Commenter:
    """示例评论者"""
    return Commenter(id=COMMENTER_ID, name="Carol")


@pytest.fixture
def sample_post() -> Post:
    """示例文章（草稿）"""
    return Post(id=42, author_id=UNLOCKED_AUTHOR_ID)


# ============== 内存仓储夹具 ==============


@pytest.fixture
def author_repo(unlocked_author: Author, locked_author: Author) -> InMemoryAuthorRepository:
    """预置作者 1（未锁定）和作者 2（已锁定）"""
    return InMemoryAuthorRepository([unlocked_author, locked_author])


@pytest.fixture
def commenter_repo(commenter: Commenter) -> InMemoryCommenterRepository:
    """预置评论者 7"""
    return InMemoryCommenterRepository([commenter])


@pytest.fixture
def post_repo() -> InMemoryPostRepository:
    """空文章仓储，ID 从 42 开始"""
    return InMemoryPostRepository(start_id=42)


@pytest.fixture
def existing_post_id(post_repo: InMemoryPostRepository) -> int:
    """仓储中已存在的文章ID"""
    return post_repo.create_post(UNLOCKED_AUTHOR_ID)


# ============== Mock 夹具 ==============


@pytest.fixture
def mock_post_repo(sample_post: Post) -> Mock:
    """Mock 文章仓储"""
    repo = Mock()
    repo.get_by_id.return_value = sample_post
    repo.create_post.return_value = sample_post.id
    repo.update.return_value = None
    return repo


@pytest.fixture
def mock_author_repo(unlocked_author: Author) -> Mock:
    """Mock 作者仓储"""
    repo = Mock()
    repo.get_by_id.return_value = unlocked_author
    repo.update.return_value = None
    return repo
