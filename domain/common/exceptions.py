"""领域异常定义"""

from typing import Optional


class DomainException(Exception):
    """领域异常基类"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaUpgradeRequestedError(DomainException):
    """
    存储结构版本变更异常

    mailstate 数据库只是在线数据的本地缓存，不做迁移。
    版本升级或降级时无条件抛出，由调用方删除文件后重建。
    """

    def __init__(self, old_version: int, new_version: int):
        self.old_version = old_version
        self.new_version = new_version
        super().__init__(
            f"Schema version change {old_version} -> {new_version} is not supported; "
            f"the mail state cache must be discarded and recreated"
        )


class PayloadParseError(DomainException):
    """通知载荷 JSON 解析失败"""

    def __init__(self, reason: str, raw_payload: Optional[str] = None):
        self.reason = reason
        self.raw_payload = raw_payload
        super().__init__(f"Failed to parse notification payload: {reason}")


class MailStateQueryError(DomainException):
    """邮件状态查询失败（行扫描期间的意外异常）"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Mail state query failed: {reason}")
