"""通知到达时的邮件状态更新服务"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.notification.services.notification_forwarder import (
    ForwardResult,
    NotificationForwarder,
)
from domain.mailstate.repositories.mail_state_repository import MailStateRepository
from domain.mailstate.value_objects.lookup_result import LookupResult
from domain.notification.value_objects.received_notification import ReceivedNotification


@dataclass
class UpdateResult:
    """处理结果

    Attributes:
        lookup: 邮件状态查询结果
        recipient: 通知收件人（解析失败为 None）
        forward: 转发结果（未启用转发时为 None）
    """

    lookup: LookupResult
    recipient: Optional[str] = None
    forward: Optional[ForwardResult] = None

    @property
    def state(self) -> Optional[str]:
        return self.lookup.value


class MailStateUpdateService:
    """邮件状态更新服务

    收到通知后查询本地缓存的邮件状态并记录日志，
    启用转发时再交给 NotificationForwarder。
    """

    def __init__(
        self,
        repository: MailStateRepository,
        forwarder: NotificationForwarder,
        forward_enabled: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化服务

        Args:
            repository: 邮件状态仓储
            forwarder: 通知转发服务
            forward_enabled: 是否转发到远程查询服务
            logger: 日志记录器
        """
        self._repository = repository
        self._forwarder = forwarder
        self._forward_enabled = forward_enabled
        self._logger = logger or logging.getLogger(__name__)

    def update_for_payload(self, notification: ReceivedNotification) -> UpdateResult:
        """处理收到的通知

        Args:
            notification: 收到的通知

        Returns:
            UpdateResult 包含查询与转发结果
        """
        lookup = self._repository.lookup_value(
            lambda success, data: self._logger.info(f"got state: {data}")
        )

        if not self._forward_enabled:
            recipient = self._forwarder.extract_recipient(notification)
            return UpdateResult(lookup=lookup, recipient=recipient)

        forward = self._forwarder.forward(notification, lookup.value)
        return UpdateResult(lookup=lookup, recipient=forward.recipient, forward=forward)

    def record_opened(self, notification: ReceivedNotification) -> Optional[str]:
        """处理通知被打开事件

        只记录日志，不查询邮件状态。

        Returns:
            通知收件人（解析失败为 None）
        """
        recipient = self._forwarder.extract_recipient(notification)
        self._logger.info(f"notification opened: recipient={recipient}")
        return recipient
