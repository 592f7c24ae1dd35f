"""MailState 领域值对象模块"""

from domain.mailstate.value_objects.mail_state_record import (
    MAIL_STATE_FORMAT,
    MailStateRecord,
)
from domain.mailstate.value_objects.lookup_result import LookupResult

__all__ = ["MAIL_STATE_FORMAT", "MailStateRecord", "LookupResult"]
