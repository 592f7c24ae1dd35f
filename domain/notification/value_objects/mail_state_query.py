"""远程查询请求值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class MailStateQuery(BaseValueObject):
    """转发给远程查询服务的数据

    Attributes:
        recipient: 通知收件人（解析失败时为 None）
        state: 本地缓存的邮件状态（未命中时为 None）
    """

    recipient: Optional[str]
    state: Optional[str]
