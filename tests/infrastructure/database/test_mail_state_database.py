"""MailStateDatabase 测试"""

import sqlite3
import threading

import pytest
from sqlalchemy import text

from domain.common.exceptions import SchemaUpgradeRequestedError
from infrastructure.database.mail_state_database import MailStateDatabase
from infrastructure.mailstate.repositories.sqlalchemy_mail_state_repository import (
    SqlAlchemyMailStateRepository,
)


def _user_version(path) -> int:
    connection = sqlite3.connect(str(path))
    try:
        return connection.execute("PRAGMA user_version").fetchone()[0]
    finally:
        connection.close()


def _set_user_version(path, version: int) -> None:
    connection = sqlite3.connect(str(path))
    try:
        connection.execute(f"PRAGMA user_version = {version}")
        connection.commit()
    finally:
        connection.close()


def _populate(path, rows) -> None:
    """模拟外部写入方建表并写入数据"""
    connection = sqlite3.connect(str(path))
    try:
        connection.execute("CREATE TABLE IF NOT EXISTS mailstate (fmt TEXT, value TEXT)")
        connection.executemany("INSERT INTO mailstate (fmt, value) VALUES (?, ?)", rows)
        connection.commit()
    finally:
        connection.close()


class TestMailStateDatabaseOpen:
    """open() 方法测试"""

    def test_open_creates_missing_file(self, tmp_path):
        """测试文件不存在时创建空库而不抛出异常"""
        data_dir = tmp_path / "nested" / "data"
        database = MailStateDatabase(data_dir=str(data_dir))

        database.open()

        assert database.is_open is True
        assert (data_dir / "twobird.db").exists()
        database.close()

    def test_open_is_idempotent(self, tmp_path):
        """测试重复 open() 返回同一个引擎"""
        database = MailStateDatabase(data_dir=str(tmp_path))

        first = database.open()
        second = database.open()

        assert first is second
        database.close()

    def test_location_hint_overrides_data_dir(self, tmp_path):
        """测试 location_hint 覆盖配置目录"""
        database = MailStateDatabase(data_dir=str(tmp_path / "configured"))

        database.open(location_hint=str(tmp_path / "hinted"))

        assert (tmp_path / "hinted" / "twobird.db").exists()
        assert not (tmp_path / "configured" / "twobird.db").exists()
        database.close()

    def test_fresh_file_is_stamped_with_version(self, tmp_path):
        """测试新建库写入结构版本"""
        database = MailStateDatabase(data_dir=str(tmp_path), version=1)
        database.open()
        database.close()

        assert _user_version(tmp_path / "twobird.db") == 1

    def test_create_hook_does_not_create_schema(self, tmp_path):
        """测试建库钩子不创建 mailstate 表"""
        database = MailStateDatabase(data_dir=str(tmp_path))
        engine = database.open()

        with engine.connect() as connection:
            tables = connection.execute(
                text("SELECT name FROM sqlite_master WHERE type='table'")
            ).fetchall()

        assert tables == []
        database.close()

    def test_in_memory_database(self):
        """测试内存数据库"""
        database = MailStateDatabase(in_memory=True)

        with database:
            assert database.is_open is True

        assert database.is_open is False


class TestMailStateDatabaseClose:
    """close() 方法测试"""

    def test_close_clears_handle(self, tmp_path):
        database = MailStateDatabase(data_dir=str(tmp_path))
        database.open()

        database.close()

        assert database.is_open is False

    def test_close_when_not_open_is_noop(self, tmp_path):
        database = MailStateDatabase(data_dir=str(tmp_path))

        database.close()

        assert database.is_open is False

    def test_session_after_close_reopens(self, tmp_path):
        """测试 close() 之后获取 Session 会重新打开同一个文件"""
        database = MailStateDatabase(data_dir=str(tmp_path))
        database.open()
        _populate(tmp_path / "twobird.db", [("May-22-2019", "archived")])
        database.close()

        with database.session() as session:
            value = session.execute(text("SELECT value FROM mailstate")).scalar()

        assert value == "archived"
        assert database.is_open is True
        database.close()

    def test_reopen_after_close_keeps_location_hint(self, tmp_path):
        """测试以 location_hint 打开后，close() 再访问仍使用同一位置"""
        hinted = tmp_path / "hinted"
        database = MailStateDatabase(data_dir=str(tmp_path / "configured"))
        database.open(location_hint=str(hinted))
        _populate(hinted / "twobird.db", [("May-22-2019", "archived")])
        database.close()

        repository = SqlAlchemyMailStateRepository(database)
        result = repository.lookup_value()

        assert result.value == "archived"
        assert result.error is None
        assert not (tmp_path / "configured" / "twobird.db").exists()
        database.close()

    def test_explicit_hint_after_close_replaces_location(self, tmp_path):
        """测试 close() 后显式传入新的 location_hint 会切换位置"""
        database = MailStateDatabase(data_dir=str(tmp_path / "configured"))
        database.open(location_hint=str(tmp_path / "first"))
        database.close()

        database.open(location_hint=str(tmp_path / "second"))

        assert database.path_for() == tmp_path / "second" / "twobird.db"
        assert (tmp_path / "second" / "twobird.db").exists()
        database.close()


class TestMailStateDatabaseConcurrency:
    """并发打开测试"""

    def test_concurrent_first_open_builds_single_engine(self, tmp_path):
        """测试多个线程同时首次打开只创建一个引擎"""
        database = MailStateDatabase(data_dir=str(tmp_path))
        barrier = threading.Barrier(8)
        engines = []

        def worker():
            barrier.wait()
            engines.append(database.open())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(engines) == 8
        assert all(engine is engines[0] for engine in engines)
        database.close()


class TestMailStateDatabaseVersionPolicy:
    """结构版本策略测试"""

    def test_same_version_opens(self, tmp_path):
        MailStateDatabase(data_dir=str(tmp_path), version=1).open()

        database = MailStateDatabase(data_dir=str(tmp_path), version=1)
        database.open()

        assert database.is_open is True
        database.close()

    def test_upgrade_raises(self, tmp_path):
        """测试升级无条件抛出"""
        first = MailStateDatabase(data_dir=str(tmp_path), version=1)
        first.open()
        first.close()

        database = MailStateDatabase(data_dir=str(tmp_path), version=2)

        with pytest.raises(SchemaUpgradeRequestedError) as exc_info:
            database.open()

        assert exc_info.value.old_version == 1
        assert exc_info.value.new_version == 2
        assert database.is_open is False

    def test_downgrade_raises(self, tmp_path):
        """测试降级无条件抛出"""
        database = MailStateDatabase(data_dir=str(tmp_path), version=1)
        database.open()
        database.close()
        _set_user_version(tmp_path / "twobird.db", 3)

        with pytest.raises(SchemaUpgradeRequestedError) as exc_info:
            database.open()

        assert exc_info.value.old_version == 3
        assert exc_info.value.new_version == 1

    def test_failed_open_does_not_migrate(self, tmp_path):
        """测试版本不一致时不会改写版本号"""
        MailStateDatabase(data_dir=str(tmp_path), version=1).open()

        with pytest.raises(SchemaUpgradeRequestedError):
            MailStateDatabase(data_dir=str(tmp_path), version=5).open()

        assert _user_version(tmp_path / "twobird.db") == 1

    @pytest.mark.parametrize(
        "old_version,new_version",
        [(1, 2), (2, 1), (0, 1), (1, 1), (7, 42)],
    )
    def test_upgrade_hook_always_raises(self, old_version, new_version):
        """测试升级钩子对任意版本对都抛出"""
        database = MailStateDatabase(in_memory=True)

        with pytest.raises(SchemaUpgradeRequestedError):
            database.on_upgrade(None, old_version, new_version)

    @pytest.mark.parametrize(
        "old_version,new_version",
        [(2, 1), (1, 2), (3, 3)],
    )
    def test_downgrade_hook_always_raises(self, old_version, new_version):
        """测试降级钩子对任意版本对都抛出"""
        database = MailStateDatabase(in_memory=True)

        with pytest.raises(SchemaUpgradeRequestedError):
            database.on_downgrade(None, old_version, new_version)
