"""通知事件分发"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from domain.notification.value_objects.notification_event_type import NotificationEventType

EventHandler = Callable[[Any], Any]

@dataclass
class DispatchOutcome:
    """分发结果

    Attributes:
        delivered: 是否已交给监听器（False 表示已缓存，等待监听器注册）
        result: 监听器返回值
    """

    delivered: bool
    result: Any = None

class NotificationEventDispatcher:
    """通知事件分发器

    每种事件类型最多一个监听器。
    监听器注册之前到达的事件会被缓存（每种类型只保留最新一条），
    注册时立即回放并清除缓存。
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._handlers: Dict[NotificationEventType, EventHandler] = {}
        self._cache: Dict[NotificationEventType, Any] = {}
        self._logger = logger or logging.getLogger(__name__)

    def add_listener(
        self, event_type: Union[str, NotificationEventType], handler: EventHandler
    ) -> Optional[DispatchOutcome]:
        """注册监听器

        Returns:
            如果回放了缓存事件，返回其分发结果；否则返回 None

        Raises:
            ValueError: 不支持的事件类型
        """
        event_type = NotificationEventType.parse(event_type)
        self._handlers[event_type] = handler

        if event_type not in self._cache:
            return None

        event = self._cache.pop(event_type)
        self._logger.debug(f"Replaying cached '{event_type.value}' event")
        return DispatchOutcome(delivered=True, result=handler(event))

    def remove_listener(self, event_type: Union[str, NotificationEventType]) -> None:
        """移除监听器"""
        event_type = NotificationEventType.parse(event_type)
        self._handlers.pop(event_type, None)

    def clear_listeners(self) -> None:
        """移除全部监听器"""
        self._handlers.clear()

    def dispatch(
        self, event_type: Union[str, NotificationEventType], event: Any
    ) -> DispatchOutcome:
        """分发事件

        Raises:
            ValueError: 不支持的事件类型
        """
        event_type = NotificationEventType.parse(event_type)
        handler = self._handlers.get(event_type)

        if handler is None:
            self._logger.debug(f"No listener for '{event_type.value}', caching event")
            self._cache[event_type] = event
            return DispatchOutcome(delivered=False)

        return DispatchOutcome(delivered=True, result=handler(event))
