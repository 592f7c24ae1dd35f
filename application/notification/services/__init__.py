"""通知应用服务"""

from application.notification.services.notification_forwarder import (
    ForwardResult,
    NotificationForwarder,
    extract_recipient,
)
from application.notification.services.mail_state_update_service import (
    MailStateUpdateService,
    UpdateResult,
)
from application.notification.services.notification_event_dispatcher import (
    DispatchOutcome,
    NotificationEventDispatcher,
)

__all__ = [
    "ForwardResult",
    "NotificationForwarder",
    "extract_recipient",
    "MailStateUpdateService",
    "UpdateResult",
    "DispatchOutcome",
    "NotificationEventDispatcher",
]
