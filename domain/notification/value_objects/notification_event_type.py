"""通知事件类型值对象"""

from enum import Enum


class NotificationEventType(str, Enum):
    """通知事件类型

    Attributes:
        RECEIVED: 收到通知
        OPENED: 用户打开通知
    """

    RECEIVED = "received"
    OPENED = "opened"

    @classmethod
    def parse(cls, value: str) -> "NotificationEventType":
        """从字符串解析事件类型

        Raises:
            ValueError: 不支持的事件类型
        """
        try:
            return cls(value)
        except ValueError:
            supported = ", ".join(f"'{t.value}'" for t in cls)
            raise ValueError(
                f"Unsupported notification event '{value}'. Supported: {supported}"
            ) from None
