"""
数据库基础设施模块
"""

from .mail_state_database import MailStateDatabase

__all__ = [
    "MailStateDatabase",
]
