"""邮件状态 SQLAlchemy 仓储实现"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from domain.common.exceptions import MailStateQueryError
from domain.mailstate.repositories.mail_state_repository import (
    CompletionHandler,
    MailStateRepository,
)
from domain.mailstate.value_objects.lookup_result import LookupResult
from domain.mailstate.value_objects.mail_state_record import MAIL_STATE_FORMAT
from infrastructure.database.mail_state_database import MailStateDatabase
from infrastructure.mailstate.models.mail_state_model import MailStateModel


class SqlAlchemyMailStateRepository(MailStateRepository):
    """
    邮件状态 SQLAlchemy 仓储实现

    只读。每次查询最多读取一行（第一条匹配行，不排序）。
    """

    def __init__(
        self,
        database: MailStateDatabase,
        format_tag: str = MAIL_STATE_FORMAT,
        strict: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化仓储

        Args:
            database: 显式持有的数据库句柄
            format_tag: 查询使用的格式标签
            strict: 为 True 时查询异常报告 success=False
            logger: 日志记录器
        """
        self._database = database
        self._format_tag = format_tag
        self._strict = strict
        self._logger = logger or logging.getLogger(__name__)

    @property
    def format_tag(self) -> str:
        return self._format_tag

    def lookup_value(
        self, on_completed: Optional[CompletionHandler] = None
    ) -> LookupResult:
        """查询当前格式标签对应的状态值

        行扫描期间的 SQLAlchemy 异常会被记录并掩盖：
        默认仍报告 success=True（value 为 None），错误信息放在 result.error。
        结构版本异常不属于查询异常，会直接抛出。
        """
        try:
            with self._database.session() as session:
                row = session.query(MailStateModel.value).filter(
                    MailStateModel.format == self._format_tag
                ).first()
        except SQLAlchemyError as e:
            error = MailStateQueryError(str(e))
            self._logger.exception(error.message)
            result = LookupResult(
                success=not self._strict,
                value=None,
                error=error.message,
            )
        else:
            if row is None:
                self._logger.debug(f"No mail state row for format {self._format_tag}")
                result = LookupResult.miss()
            else:
                result = LookupResult.hit(row.value)

        if on_completed is not None:
            on_completed(result.success, result.value)
        return result
