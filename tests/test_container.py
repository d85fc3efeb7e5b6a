"""依赖注入容器测试

测试 Container 类的依赖创建和管理功能。
"""

import pytest
from loguru import logger

from blog_domain.application.use_cases import AddPostUseCase, UpdateTitleUseCase
from blog_domain.infrastructure.adapters.repositories import InMemoryPostRepository
from blog_domain.infrastructure.config.container import (
    Container,
    get_container,
    reset_container,
)
from blog_domain.infrastructure.config.settings import AppSettings, RepositorySettings
from blog_domain.shared.utils import setup_logger


class TestContainer:
    """Container 测试"""

    @pytest.fixture(autouse=True)
    def reset(self) -> None:
        """每个测试前重置容器"""
        reset_container()

    @pytest.mark.unit
    def test_container_creation(self) -> None:
        """测试容器创建"""
        container = Container()
        assert isinstance(container.settings, AppSettings)

    @pytest.mark.unit
    def test_repositories_lazy_loading(self) -> None:
        """测试仓储延迟加载"""
        container = Container(settings=AppSettings())
        assert container._posts is None

        posts = container.posts
        assert isinstance(posts, InMemoryPostRepository)
        assert container.posts is posts
        assert container.authors is container._authors

    @pytest.mark.unit
    def test_use_cases_share_repositories(self) -> None:
        """测试用例共享同一组仓储"""
        container = Container(settings=AppSettings())

        add_post = container.add_post_use_case
        update_title = container.update_title_use_case

        assert isinstance(add_post, AddPostUseCase)
        assert isinstance(update_title, UpdateTitleUseCase)
        assert add_post._posts is update_title._posts is container.posts
        assert container.add_post_use_case is add_post

    @pytest.mark.unit
    def test_post_id_start_from_settings(self) -> None:
        """测试起始ID来自配置"""
        settings = AppSettings(repository=RepositorySettings(post_id_start=1000))
        container = Container(settings=settings)

        assert container.posts.create_post(1) == 1000

    @pytest.mark.unit
    def test_env_prefix(self, monkeypatch) -> None:
        """测试环境变量配置"""
        monkeypatch.setenv("BLOG_DOMAIN_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("BLOG_DOMAIN_REPOSITORY__POST_ID_START", "7")

        settings = AppSettings()

        assert settings.log_level == "WARNING"
        assert settings.repository.post_id_start == 7

    @pytest.mark.unit
    def test_debug_forces_debug_level(self) -> None:
        """测试调试模式强制 DEBUG"""
        assert AppSettings(debug=True, log_level="ERROR").effective_log_level == "DEBUG"

    @pytest.mark.unit
    def test_configure_logging(self, tmp_path) -> None:
        """测试按配置写入日志文件"""
        settings = AppSettings(log_to_file=True, log_dir=tmp_path)
        Container(settings=settings).configure_logging()
        try:
            logger.info("configured")
            logger.complete()
            assert (tmp_path / "blog_domain.log").exists()
        finally:
            setup_logger()

    @pytest.mark.unit
    def test_global_container_singleton(self) -> None:
        """测试全局容器单例"""
        first = get_container()
        assert get_container() is first

        reset_container()
        assert get_container() is not first
