"""标签值对象 - 带验证"""

from __future__ import annotations

from dataclasses import dataclass

from ...shared.constants import MAX_TAG_LENGTH
from ...shared.exceptions import ValidationError


@dataclass(frozen=True)
class Tag:
    """
    标签值对象

    没有独立身份与生命周期，名称相同的两个标签可互换。
    名称在构造时去除首尾空白。
    """

    name: str

    def __post_init__(self) -> None:
        """规范化并验证名称"""
        name = (self.name or "").strip()
        if not name:
            raise ValidationError("Tag name is required")

        if len(name) > MAX_TAG_LENGTH:
            raise ValidationError(
                f"Tag max is {MAX_TAG_LENGTH} letters",
                details={"length": len(name)},
            )

        # frozen dataclass 需要绕过 __setattr__
        object.__setattr__(self, "name", name)

    @classmethod
    def from_string(cls, name: str | None) -> Tag:
        """从字符串创建标签，缺失值按空字符串处理"""
        return cls(name=name or "")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Tag({self.name!r})"
