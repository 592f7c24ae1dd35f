"""Tests for MailStateRecord and LookupResult value objects"""

import pytest
from dataclasses import FrozenInstanceError

from domain.mailstate.value_objects import (
    MAIL_STATE_FORMAT,
    LookupResult,
    MailStateRecord,
)


class TestMailStateRecord:
    """MailStateRecord 值对象测试"""

    def test_default_format_tag(self):
        """测试默认格式标签"""
        assert MAIL_STATE_FORMAT == "May-22-2019"

    def test_create_record(self):
        """测试创建记录"""
        record = MailStateRecord(format=MAIL_STATE_FORMAT, value="archived")

        assert record.format == "May-22-2019"
        assert record.value == "archived"

    def test_value_is_nullable(self):
        """测试 value 可以为空"""
        record = MailStateRecord(format=MAIL_STATE_FORMAT)

        assert record.value is None

    def test_empty_format_raises(self):
        """测试空格式标签抛出异常"""
        with pytest.raises(ValueError, match="Format tag cannot be empty"):
            MailStateRecord(format="")

    def test_record_is_immutable(self):
        """测试记录不可变"""
        record = MailStateRecord(format=MAIL_STATE_FORMAT, value="a")

        with pytest.raises(FrozenInstanceError):
            record.value = "b"  # type: ignore[misc]

    def test_equality_by_value(self):
        """测试按属性比较相等"""
        assert MailStateRecord(format="x", value="1") == MailStateRecord(format="x", value="1")
        assert MailStateRecord(format="x", value="1") != MailStateRecord(format="x", value="2")


class TestLookupResult:
    """LookupResult 测试"""

    def test_hit(self):
        result = LookupResult.hit("archived")

        assert result.success is True
        assert result.value == "archived"
        assert result.error is None

    def test_miss_is_success_without_value(self):
        """测试未命中不是错误"""
        result = LookupResult.miss()

        assert result.success is True
        assert result.value is None
        assert result.error is None

    def test_masked_failure_keeps_error(self):
        """测试被掩盖的失败仍保留错误信息"""
        result = LookupResult(success=True, value=None, error="boom")

        assert result.success is True
        assert result.error == "boom"
