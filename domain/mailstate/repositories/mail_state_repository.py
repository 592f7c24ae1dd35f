"""邮件状态仓储接口"""

from typing import Callable, Optional, Protocol

from domain.mailstate.value_objects.lookup_result import LookupResult


# 完成回调：on_completed(success, data)
CompletionHandler = Callable[[bool, Optional[str]], None]


class MailStateRepository(Protocol):
    """邮件状态仓储接口

    只读访问按固定格式标签缓存的状态值。
    记录由外部协作方写入，本仓储从不写入。
    具体实现在 infrastructure 层。
    """

    @property
    def format_tag(self) -> str:
        """查询使用的格式标签"""
        ...

    def lookup_value(
        self, on_completed: Optional[CompletionHandler] = None
    ) -> LookupResult:
        """查询当前格式标签对应的状态值

        取第一条匹配行的 value 列。未命中时返回 success=True、value=None，
        不抛出异常。

        Args:
            on_completed: 可选的完成回调，会以相同结果被调用一次

        Returns:
            LookupResult 查询结果
        """
        ...
