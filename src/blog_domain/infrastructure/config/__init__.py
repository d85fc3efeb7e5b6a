"""配置模块"""

from .container import Container, get_container, reset_container
from .settings import AppSettings, RepositorySettings, get_settings

__all__ = [
    "AppSettings",
    "RepositorySettings",
    "get_settings",
    "Container",
    "get_container",
    "reset_container",
]
