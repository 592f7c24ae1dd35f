"""邮件状态本地数据库句柄"""

import logging
import threading
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from domain.common.exceptions import SchemaUpgradeRequestedError


class MailStateDatabase:
    """
    邮件状态本地 SQLite 数据库

    显式持有的数据库句柄，由 DI 容器创建并在应用关闭时释放。

    - open() 幂等：已打开时直接返回现有引擎
    - 文件不存在时由 SQLite 创建空库，不会抛出异常
    - 结构版本记录在 PRAGMA user_version 中；版本不一致视为需要重建缓存
    - close() 后再次访问会重新打开，不会使用已释放的句柄

    Attributes:
        DATABASE_NAME: 默认数据库文件名
        DATABASE_VERSION: 当前结构版本
    """

    DATABASE_NAME: str = "twobird.db"
    DATABASE_VERSION: int = 1

    def __init__(
        self,
        data_dir: str = "data",
        db_name: str = DATABASE_NAME,
        version: int = DATABASE_VERSION,
        in_memory: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化句柄（不会立即连接数据库）

        Args:
            data_dir: 数据库文件所在目录
            db_name: 数据库文件名
            version: 期望的结构版本
            in_memory: 是否使用内存数据库（测试环境）
            logger: 日志记录器
        """
        self._data_dir = data_dir
        self._db_name = db_name
        self._version = version
        self._in_memory = in_memory
        self._logger = logger or logging.getLogger(__name__)

        self._location_hint: Optional[str] = None
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        """句柄是否已打开"""
        return self._engine is not None

    @property
    def version(self) -> int:
        return self._version

    def path_for(self, location_hint: Optional[str] = None) -> Path:
        """计算数据库文件路径

        Args:
            location_hint: 可选目录，覆盖上次打开时记录的目录和配置的 data_dir
        """
        return Path(location_hint or self._location_hint or self._data_dir) / self._db_name

    def open(self, location_hint: Optional[str] = None) -> Engine:
        """
        打开数据库（幂等，线程安全）

        Args:
            location_hint: 可选目录，已打开时忽略；打开成功后被记录，
                close() 之后的重新打开沿用同一位置

        Returns:
            SQLAlchemy Engine

        Raises:
            SchemaUpgradeRequestedError: 已有文件的结构版本与期望版本不一致
        """
        with self._lock:
            if self._engine is not None:
                return self._engine
            return self._open_locked(location_hint)

    def _open_locked(self, location_hint: Optional[str]) -> Engine:
        if self._in_memory:
            engine = create_engine(
                "sqlite:///:memory:",
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            self._logger.debug("Opening in-memory mail state database")
        else:
            path = self.path_for(location_hint)
            path.parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(
                f"sqlite:///{path}",
                connect_args={"check_same_thread": False},
            )
            self._logger.debug(f"Opening mail state database at {path}")

        try:
            self._check_version(engine)
        except Exception:
            engine.dispose()
            raise

        if not self._in_memory and location_hint:
            self._location_hint = location_hint
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        return engine

    def session(self) -> Session:
        """
        获取新的数据库 Session

        句柄未打开时会先打开（包括 close() 之后，位置与上次打开时一致）。
        """
        with self._lock:
            if self._session_factory is None:
                self._open_locked(None)
            return self._session_factory()  # type: ignore[misc]

    def close(self) -> None:
        """释放句柄，之后的访问会在同一位置重新打开"""
        with self._lock:
            if self._engine is None:
                return
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
        self._logger.debug("Mail state database closed")

    # ============ 结构版本钩子 ============

    def on_create(self, connection) -> None:
        """新建数据库钩子

        mailstate 表由外部协作方创建并填充，这里只记录日志。
        """
        self._logger.debug("Mail state database created; schema is populated externally")

    def on_upgrade(self, connection, old_version: int, new_version: int) -> None:
        """结构升级钩子

        本数据库只是在线数据的缓存，不做迁移。

        Raises:
            SchemaUpgradeRequestedError: 无条件抛出
        """
        raise SchemaUpgradeRequestedError(old_version, new_version)

    def on_downgrade(self, connection, old_version: int, new_version: int) -> None:
        """结构降级钩子，与升级策略一致"""
        self.on_upgrade(connection, old_version, new_version)

    def _check_version(self, engine: Engine) -> None:
        """比较 user_version 与期望版本，并调用对应钩子"""
        with engine.begin() as connection:
            current = connection.execute(text("PRAGMA user_version")).scalar() or 0

            if current == self._version:
                return

            if current == 0:
                self.on_create(connection)
                # PRAGMA 不支持参数绑定
                connection.execute(text(f"PRAGMA user_version = {int(self._version)}"))
            elif current < self._version:
                self._logger.error(
                    f"Mail state schema upgrade requested: {current} -> {self._version}"
                )
                self.on_upgrade(connection, current, self._version)
            else:
                self._logger.error(
                    f"Mail state schema downgrade requested: {current} -> {self._version}"
                )
                self.on_downgrade(connection, current, self._version)

    def __enter__(self) -> "MailStateDatabase":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        location = ":memory:" if self._in_memory else str(self.path_for())
        return f"<MailStateDatabase(location={location}, open={self.is_open})>"
