"""收到的推送通知值对象"""

from dataclasses import dataclass, field
from typing import Optional

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class NotificationPayload(BaseValueObject):
    """通知载荷

    Attributes:
        raw_payload: 推送服务下发的原始 JSON 字符串
        notification_id: 通知 ID（可选）
        title: 标题（可选）
        body: 正文（可选）
    """

    raw_payload: str = ""
    notification_id: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None


@dataclass(frozen=True)
class ReceivedNotification(BaseValueObject):
    """收到的推送通知

    宿主推送框架在通知送达时产生的事件对象。
    本服务只消费 payload.raw_payload 中的 recipient 字段。

    Attributes:
        payload: 通知载荷
        is_app_in_focus: 收到时应用是否在前台
        shown: 是否已展示给用户
    """

    payload: NotificationPayload = field(default_factory=NotificationPayload)
    is_app_in_focus: bool = False
    shown: bool = False
