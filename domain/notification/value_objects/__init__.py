"""Notification 领域值对象模块"""

from domain.notification.value_objects.notification_event_type import NotificationEventType
from domain.notification.value_objects.received_notification import (
    NotificationPayload,
    ReceivedNotification,
)
from domain.notification.value_objects.mail_state_query import MailStateQuery

__all__ = [
    "NotificationEventType",
    "NotificationPayload",
    "ReceivedNotification",
    "MailStateQuery",
]
