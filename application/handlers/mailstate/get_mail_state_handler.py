"""查询邮件状态 Handler"""

from dataclasses import dataclass
from typing import Optional
import logging

from application.queries.mailstate.get_mail_state import GetMailStateQuery
from domain.mailstate.value_objects.mail_state_record import MailStateRecord
from domain.mailstate.repositories.mail_state_repository import MailStateRepository


@dataclass
class MailStateResult:
    """查询结果

    Attributes:
        success: 是否成功
        record: 查询到的记录（value 可能为 None）
        error: 被掩盖的查询错误信息
    """

    success: bool
    record: MailStateRecord
    error: Optional[str] = None


class GetMailStateHandler:
    """查询邮件状态 Handler

    处理 GetMailStateQuery，返回当前格式标签下的状态值。
    """

    def __init__(
        self,
        repository: MailStateRepository,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化 Handler

        Args:
            repository: 邮件状态仓储
            logger: 日志记录器
        """
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, query: GetMailStateQuery) -> MailStateResult:
        """处理查询请求

        Args:
            query: 查询对象

        Returns:
            MailStateResult 包含查询结果
        """
        self._logger.debug(
            f"Handling GetMailStateQuery for format={self._repository.format_tag}"
        )

        lookup = self._repository.lookup_value()

        return MailStateResult(
            success=lookup.success,
            record=MailStateRecord(
                format=self._repository.format_tag,
                value=lookup.value,
            ),
            error=lookup.error,
        )
