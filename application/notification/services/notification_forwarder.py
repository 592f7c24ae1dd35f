"""通知转发服务"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from domain.common.exceptions import PayloadParseError
from domain.notification.services.mail_query_client import MailQueryClient
from domain.notification.value_objects.mail_state_query import MailStateQuery
from domain.notification.value_objects.received_notification import ReceivedNotification


RECIPIENT_KEY = "recipient"

# 完成回调：on_completed(success, data)
ForwardCompletionHandler = Callable[[bool, Any], None]

_logger = logging.getLogger(__name__)


def parse_recipient(raw_payload: Optional[str]) -> str:
    """从原始 JSON 载荷中解析 recipient

    Raises:
        PayloadParseError: 载荷不是合法 JSON 对象，或缺少字符串类型的 recipient
    """
    if raw_payload is None:
        raise PayloadParseError("payload is empty")

    try:
        body = json.loads(raw_payload)
    except (TypeError, ValueError) as e:
        raise PayloadParseError(str(e), raw_payload) from e

    if not isinstance(body, dict):
        raise PayloadParseError("payload is not a JSON object", raw_payload)

    if RECIPIENT_KEY not in body:
        raise PayloadParseError(f"no value for '{RECIPIENT_KEY}'", raw_payload)

    recipient = body[RECIPIENT_KEY]
    if not isinstance(recipient, str):
        raise PayloadParseError(f"'{RECIPIENT_KEY}' is not a string", raw_payload)

    return recipient


def extract_recipient(
    raw_payload: Optional[str], logger: Optional[logging.Logger] = None
) -> Optional[str]:
    """提取 recipient，解析失败时记录日志并返回 None"""
    try:
        return parse_recipient(raw_payload)
    except PayloadParseError as e:
        (logger or _logger).warning(e.message)
        return None


@dataclass
class ForwardResult:
    """转发结果

    Attributes:
        success: 是否成功
        forwarded: 是否实际调用了远程查询服务
        recipient: 解析出的收件人
        state: 转发的状态值
        data: 远程服务返回的数据
        error_message: 错误信息（失败或未转发时）
    """

    success: bool
    forwarded: bool = False
    recipient: Optional[str] = None
    state: Optional[str] = None
    data: Optional[Any] = None
    error_message: str = ""


class NotificationForwarder:
    """通知转发服务

    从收到的通知中提取 recipient，并将 {recipient, state}
    交给远程查询服务。远程协议未定义，查询客户端由外部注入；
    未注入时只做提取，不发起任何网络调用。
    """

    def __init__(
        self,
        query_client: Optional[MailQueryClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化服务

        Args:
            query_client: 远程查询客户端（可选）
            logger: 日志记录器
        """
        self._query_client = query_client
        self._logger = logger or logging.getLogger(__name__)

    def extract_recipient(self, notification: ReceivedNotification) -> Optional[str]:
        """从通知载荷中提取 recipient

        Args:
            notification: 收到的通知

        Returns:
            收件人地址，解析失败返回 None
        """
        return extract_recipient(notification.payload.raw_payload, self._logger)

    def forward(
        self,
        notification: ReceivedNotification,
        state: Optional[str],
        on_completed: Optional[ForwardCompletionHandler] = None,
    ) -> ForwardResult:
        """转发 {recipient, state} 到远程查询服务

        Args:
            notification: 收到的通知
            state: 之前查询到的邮件状态
            on_completed: 可选的完成回调

        Returns:
            ForwardResult 包含转发结果
        """
        recipient = self.extract_recipient(notification)
        request = MailStateQuery(recipient=recipient, state=state)

        if self._query_client is None:
            self._logger.debug("No mail query client configured; skipping forward")
            result = ForwardResult(
                success=True,
                forwarded=False,
                recipient=recipient,
                state=state,
                error_message="No mail query client configured",
            )
        else:
            result = self._send(request)

        if on_completed is not None:
            on_completed(result.success, result.data)
        return result

    def _send(self, request: MailStateQuery) -> ForwardResult:
        """调用远程查询客户端"""
        self._logger.info(f"Forwarding mail state for recipient {request.recipient}")
        try:
            query_result = self._query_client.query(request)  # type: ignore[union-attr]
        except Exception as e:
            self._logger.exception(f"Mail query client failed: {e}")
            return ForwardResult(
                success=False,
                forwarded=True,
                recipient=request.recipient,
                state=request.state,
                error_message=str(e),
            )

        if not query_result.success:
            self._logger.warning(f"Mail query failed: {query_result.error_message}")

        return ForwardResult(
            success=query_result.success,
            forwarded=True,
            recipient=request.recipient,
            state=request.state,
            data=query_result.data,
            error_message=query_result.error_message,
        )
