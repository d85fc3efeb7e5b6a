"""配置管理 - 基于Pydantic Settings

环境变量使用 BLOG_DOMAIN_ 前缀，嵌套字段用双下划线，例如：
    BLOG_DOMAIN_LOG_LEVEL=DEBUG
    BLOG_DOMAIN_REPOSITORY__POST_ID_START=1000
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...shared.constants import DEFAULT_POST_ID_START


class RepositorySettings(BaseSettings):
    """仓储配置"""

    backend: Literal["memory"] = Field(default="memory", description="仓储实现")
    post_id_start: int = Field(default=DEFAULT_POST_ID_START, ge=1, description="文章起始ID")


class AppSettings(BaseSettings):
    """主应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="BLOG_DOMAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="调试模式")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="日志级别",
    )
    log_json: bool = Field(default=False, description="是否输出JSON结构化日志")
    log_to_file: bool = Field(default=False, description="是否写入日志文件")
    log_dir: Path | None = Field(default=None, description="日志目录")

    repository: RepositorySettings = Field(default_factory=RepositorySettings)

    @property
    def effective_log_level(self) -> str:
        """调试模式强制 DEBUG"""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> AppSettings:
    """获取应用配置（单例）"""
    return AppSettings()
