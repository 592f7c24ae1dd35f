"""远程邮件查询服务接口"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from domain.notification.value_objects.mail_state_query import MailStateQuery


@dataclass
class QueryResult:
    """远程查询结果

    Attributes:
        success: 是否成功
        data: 远程服务返回的数据
        error_message: 错误信息（失败时）
    """

    success: bool
    data: Optional[Any] = None
    error_message: str = ""


class MailQueryClient(Protocol):
    """远程邮件查询服务接口

    协议尚未定义，本服务不提供实现。
    由部署方注入具体客户端。
    """

    def query(self, request: MailStateQuery) -> QueryResult:
        """发送 {recipient, state} 到远程查询服务

        Args:
            request: 查询请求

        Returns:
            QueryResult 包含调用结果
        """
        ...
