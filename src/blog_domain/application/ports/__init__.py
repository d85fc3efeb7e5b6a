"""
应用层端口

Hexagonal Architecture中的端口定义：
- outbound: 出站端口，定义应用层依赖的持久化接口
"""

from .outbound import AuthorRepositoryPort, CommenterRepositoryPort, PostRepositoryPort

__all__ = [
    "PostRepositoryPort",
    "AuthorRepositoryPort",
    "CommenterRepositoryPort",
]
