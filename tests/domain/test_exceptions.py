"""Tests for domain exceptions"""

from domain.common.exceptions import (
    DomainException,
    MailStateQueryError,
    PayloadParseError,
    SchemaUpgradeRequestedError,
)


class TestDomainExceptions:
    """领域异常测试"""

    def test_schema_upgrade_requested_carries_versions(self):
        error = SchemaUpgradeRequestedError(1, 2)

        assert isinstance(error, DomainException)
        assert error.old_version == 1
        assert error.new_version == 2
        assert "1 -> 2" in error.message

    def test_payload_parse_error(self):
        error = PayloadParseError("bad json", raw_payload="{")

        assert error.raw_payload == "{"
        assert error.message == "Failed to parse notification payload: bad json"

    def test_mail_state_query_error(self):
        error = MailStateQueryError("no such table: mailstate")

        assert str(error) == "Mail state query failed: no such table: mailstate"
