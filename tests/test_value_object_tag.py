"""Tag 值对象测试"""

import dataclasses

import pytest

from blog_domain.domain.value_objects import Tag
from blog_domain.shared.exceptions import ValidationError


class TestTagValueObject:
    """Tag 值对象测试"""

    @pytest.mark.unit
    def test_structural_equality(self) -> None:
        """测试同名标签相等且可互换"""
        assert Tag("python") == Tag("python")
        assert hash(Tag("python")) == hash(Tag("python"))
        assert len({Tag("python"), Tag("python"), Tag("ddd")}) == 2

    @pytest.mark.unit
    def test_name_is_trimmed(self) -> None:
        """测试名称去除首尾空白"""
        tag = Tag("  python  ")
        assert tag.name == "python"
        assert tag == Tag("python")

    @pytest.mark.unit
    def test_case_sensitive(self) -> None:
        """测试名称区分大小写"""
        assert Tag("Python") != Tag("python")

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, name) -> None:
        """测试空名称"""
        with pytest.raises(ValidationError, match="Tag name is required"):
            Tag.from_string(name)

    @pytest.mark.unit
    def test_max_length(self) -> None:
        """测试长度上限"""
        assert Tag("a" * 50).name == "a" * 50
        with pytest.raises(ValidationError, match="Tag max is 50 letters"):
            Tag("a" * 51)

    @pytest.mark.unit
    def test_immutable(self) -> None:
        """测试值对象不可变"""
        tag = Tag("python")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tag.name = "ruby"  # type: ignore[misc]

    @pytest.mark.unit
    def test_str_and_repr(self) -> None:
        """测试字符串表示"""
        tag = Tag("python")
        assert str(tag) == "python"
        assert repr(tag) == "Tag('python')"
