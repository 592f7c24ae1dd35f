"""通知处理集成测试

测试完整流程：
- 外部协作方创建并填充 mailstate 表
- 收到通知 → 查询邮件状态 → 提取 recipient
- 关闭句柄后再次处理会重新打开数据库
"""

import sqlite3

import pytest

from application.queries.mailstate.get_mail_state import GetMailStateQuery
from domain.notification.value_objects.received_notification import (
    NotificationPayload,
    ReceivedNotification,
)
from infrastructure.config.settings import Settings
from infrastructure.containers import bootstrap, shutdown


def _populate(path, rows) -> None:
    """模拟外部协作方建表并写入"""
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(str(path))
    connection.execute("CREATE TABLE IF NOT EXISTS mailstate(fmt TEXT, value TEXT)")
    connection.executemany("INSERT INTO mailstate(fmt, value) VALUES (?, ?)", rows)
    connection.commit()
    connection.close()


def _notification(raw_payload: str) -> ReceivedNotification:
    return ReceivedNotification(payload=NotificationPayload(raw_payload=raw_payload))


@pytest.fixture
def settings(tmp_path):
    return Settings(app_env="dev", data_dir=str(tmp_path / "data"))


@pytest.fixture
def boot(settings):
    boot = bootstrap(settings)
    yield boot
    shutdown(boot)


@pytest.fixture
def db_path(boot):
    return boot.infra.mail_state_database().path_for()


class TestNotificationFlow:
    """收到通知后的处理流程"""

    def test_populated_store(self, boot, db_path):
        """测试已填充的缓存返回状态值"""
        _populate(db_path, [("May-22-2019", "archived")])
        service = boot.app.mail_state_update_service()

        result = service.update_for_payload(
            _notification('{"recipient": "a@b.com"}')
        )

        assert result.lookup.success is True
        assert result.state == "archived"
        assert result.recipient == "a@b.com"

    def test_empty_store(self, boot, db_path):
        """测试空表返回 None 并报告成功"""
        _populate(db_path, [])
        service = boot.app.mail_state_update_service()

        result = service.update_for_payload(
            _notification("not json")
        )

        assert result.lookup.success is True
        assert result.state is None
        assert result.recipient is None

    def test_missing_file_is_created(self, boot, db_path):
        """测试文件不存在时创建空库，查询失败被掩盖"""
        handler = boot.app.get_mail_state_handler()

        result = handler.handle(GetMailStateQuery())

        assert db_path.exists()
        assert result.success is True
        assert result.record.value is None
        assert result.error is not None

    def test_reopens_after_shutdown(self, boot, db_path):
        """测试关闭后再次处理重新打开数据库"""
        _populate(db_path, [("May-22-2019", "archived")])
        repository = boot.infra.mail_state_repository()
        assert repository.lookup_value().value == "archived"

        shutdown(boot)
        assert boot.infra.mail_state_database().is_open is False

        assert repository.lookup_value().value == "archived"
        assert boot.infra.mail_state_database().is_open is True
