"""自定义异常类

包含：
- 错误码枚举 (ErrorCode)
- 分层异常类（领域层、应用层、基础设施层）

传输层可根据异常类型（或 code）映射到合适的响应，
用例本身不做任何本地恢复。
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """错误码枚举

    错误码范围：
    - 1xxx: 通用错误
    - 2xxx: 领域规则错误
    - 5xxx: 存储错误
    - 6xxx: 配置错误
    """

    # 通用错误 1xxx
    UNKNOWN_ERROR = (1000, "Unknown error")
    VALIDATION_ERROR = (1001, "Validation failed")

    # 领域规则错误 2xxx
    INVALID_REFERENCE = (2000, "Referenced entity not found")
    INVALID_STATE = (2001, "Entity state forbids the operation")
    NOT_FOUND = (2002, "Entity not found")

    # 存储错误 5xxx
    REPOSITORY_ERROR = (5000, "Repository operation failed")
    CONCURRENCY_CONFLICT = (5001, "Entity was modified concurrently")

    # 配置错误 6xxx
    CONFIG_ERROR = (6000, "Configuration error")

    def __init__(self, code: int, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> int:
        """错误码"""
        return self._code

    @property
    def message(self) -> str:
        """错误消息"""
        return self._message

    def __str__(self) -> str:
        return f"[{self._code}] {self._message}"


class BlogDomainError(Exception):
    """基础异常类

    所有自定义异常的基类，支持错误码和详细信息。
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.error_code
        self._message = message or self._error_code.message
        self._details = details or {}
        self._cause = cause

        super().__init__(self._message)

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def user_message(self) -> str:
        """用户友好的错误消息"""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """详细信息"""
        return self._details

    @property
    def cause(self) -> Exception | None:
        """原始异常"""
        return self._cause

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于API响应或日志）"""
        return {
            "error_code": self._error_code.code,
            "error_type": self._error_code.name,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        return f"[{self._error_code.code}] {self._message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self._error_code.code}, message={self._message!r})"


# ============ 领域层异常 ============


class DomainError(BlogDomainError):
    """领域异常基类"""


class InvalidReferenceError(DomainError):
    """引用的实体ID无法解析（如作者不存在）"""

    error_code = ErrorCode.INVALID_REFERENCE


class InvalidStateError(DomainError):
    """引用的实体存在，但其状态禁止该操作（如作者已锁定）"""

    error_code = ErrorCode.INVALID_STATE


class NotFoundError(DomainError):
    """操作的目标实体不存在"""

    error_code = ErrorCode.NOT_FOUND


# ============ 应用层异常 ============


class ApplicationError(BlogDomainError):
    """应用层异常基类"""


class ValidationError(ApplicationError):
    """输入字段违反领域约束"""

    error_code = ErrorCode.VALIDATION_ERROR


# ============ 基础设施层异常 ============


class InfrastructureError(BlogDomainError):
    """基础设施异常基类"""


class RepositoryError(InfrastructureError):
    """仓储异常"""

    error_code = ErrorCode.REPOSITORY_ERROR


class ConcurrencyConflictError(RepositoryError):
    """乐观并发冲突：保存时实体版本已过期"""

    error_code = ErrorCode.CONCURRENCY_CONFLICT


class ConfigError(InfrastructureError):
    """配置异常"""

    error_code = ErrorCode.CONFIG_ERROR


# ============ 工具函数 ============


def wrap_exception(
    exc: Exception,
    error_class: type[BlogDomainError] = InfrastructureError,
    message: str | None = None,
) -> BlogDomainError:
    """将普通异常包装为 BlogDomainError

    Args:
        exc: 原始异常
        error_class: 目标异常类
        message: 自定义消息（可选）

    Returns:
        包装后的异常
    """
    if isinstance(exc, BlogDomainError):
        return exc

    return error_class(
        message=message or str(exc),
        cause=exc,
    )
