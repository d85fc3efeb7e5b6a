"""异常体系测试"""

import pytest

from blog_domain.shared.exceptions import (
    ApplicationError,
    BlogDomainError,
    ConcurrencyConflictError,
    DomainError,
    ErrorCode,
    InfrastructureError,
    InvalidReferenceError,
    InvalidStateError,
    NotFoundError,
    RepositoryError,
    ValidationError,
    wrap_exception,
)


class TestExceptionHierarchy:
    """分层异常测试"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("error_class", "base", "code"),
        [
            (InvalidReferenceError, DomainError, 2000),
            (InvalidStateError, DomainError, 2001),
            (NotFoundError, DomainError, 2002),
            (ValidationError, ApplicationError, 1001),
            (RepositoryError, InfrastructureError, 5000),
            (ConcurrencyConflictError, RepositoryError, 5001),
        ],
    )
    def test_kinds_are_distinguishable(self, error_class, base, code) -> None:
        """测试每类失败都有独立类型与错误码"""
        error = error_class("boom")

        assert isinstance(error, base)
        assert isinstance(error, BlogDomainError)
        assert error.code == code

    @pytest.mark.unit
    def test_default_message_from_error_code(self) -> None:
        """测试未提供消息时使用错误码消息"""
        error = NotFoundError()
        assert error.user_message == ErrorCode.NOT_FOUND.message

    @pytest.mark.unit
    def test_to_dict(self) -> None:
        """测试转换为字典"""
        error = InvalidStateError("Author is locked", details={"author_id": 2})

        assert error.to_dict() == {
            "error_code": 2001,
            "error_type": "INVALID_STATE",
            "message": "Author is locked",
            "details": {"author_id": 2},
        }
        assert str(error) == "[2001] Author is locked"
        assert repr(error) == "InvalidStateError(code=2001, message='Author is locked')"

    @pytest.mark.unit
    def test_wrap_exception(self) -> None:
        """测试包装普通异常"""
        original = ConnectionError("db down")

        wrapped = wrap_exception(original, RepositoryError)

        assert isinstance(wrapped, RepositoryError)
        assert wrapped.cause is original
        assert wrapped.user_message == "db down"

    @pytest.mark.unit
    def test_wrap_keeps_domain_errors(self) -> None:
        """测试已是领域异常时原样返回"""
        error = ValidationError("bad")
        assert wrap_exception(error) is error
