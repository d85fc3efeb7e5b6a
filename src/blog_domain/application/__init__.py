"""应用层

应用层负责用例编排，协调领域层和仓储端口。

包含：
- ports: 出站端口（仓储）
- use_cases: 应用用例，每个用例一个类、一个公开方法
"""

from . import ports, use_cases

__all__ = [
    "ports",
    "use_cases",
]
