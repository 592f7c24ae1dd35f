"""Notification 领域服务接口"""

from domain.notification.services.mail_query_client import MailQueryClient, QueryResult

__all__ = ["MailQueryClient", "QueryResult"]
