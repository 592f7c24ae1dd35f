"""邮件状态记录值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject


# 当前唯一使用的格式标签
MAIL_STATE_FORMAT = "May-22-2019"


@dataclass(frozen=True)
class MailStateRecord(BaseValueObject):
    """邮件状态记录值对象

    对应 mailstate 表中的一行。

    Attributes:
        format: 格式/版本标签，作为查询键
        value: 缓存的状态载荷（可为空）
    """

    format: str
    value: Optional[str] = None

    def validate(self) -> None:
        """验证记录有效性"""
        if not self.format:
            raise ValueError("Format tag cannot be empty")
