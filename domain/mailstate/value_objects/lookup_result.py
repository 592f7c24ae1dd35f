"""邮件状态查询结果值对象"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LookupResult:
    """查询结果

    对应完成回调 on_completed(success, data) 的同步形式。
    未命中不是错误：success=True 且 value 为 None。

    Attributes:
        success: 是否成功
        value: 查询到的状态值（未命中时为 None）
        error: 查询失败时的错误信息（被掩盖的失败也会记录在这里）
    """

    success: bool
    value: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def hit(cls, value: Optional[str]) -> "LookupResult":
        return cls(success=True, value=value)

    @classmethod
    def miss(cls) -> "LookupResult":
        return cls(success=True, value=None)
