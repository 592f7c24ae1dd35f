"""查询邮件状态的 Query"""

from dataclasses import dataclass


@dataclass
class GetMailStateQuery:
    """查询邮件状态的 Query

    读取当前格式标签下缓存的状态值。
    这是一个纯读取操作，遵循 CQRS 模式。
    """
