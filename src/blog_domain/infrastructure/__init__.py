"""
基础设施层

包含仓储端口的具体实现（适配器）与配置：
- adapters/repositories: 仓储实现
- config: 配置管理和依赖注入
"""

from .config import AppSettings, Container, get_container, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    "Container",
    "get_container",
]
