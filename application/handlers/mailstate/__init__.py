"""邮件状态处理器模块"""

from application.handlers.mailstate.get_mail_state_handler import (
    GetMailStateHandler,
    MailStateResult,
)

__all__ = ["GetMailStateHandler", "MailStateResult"]
