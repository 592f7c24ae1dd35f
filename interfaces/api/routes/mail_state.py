"""查询邮件状态 API 路由"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from application.queries.mailstate.get_mail_state import GetMailStateQuery
from application.handlers.mailstate.get_mail_state_handler import (
    GetMailStateHandler,
    MailStateResult,
)
from domain.common.exceptions import SchemaUpgradeRequestedError


router = APIRouter(tags=["MailState"])


# ============ Handler 依赖注入 ============

_get_mail_state_handler_getter: Optional[Callable[[], GetMailStateHandler]] = None


def set_get_mail_state_handler_getter(
    getter: Optional[Callable[[], GetMailStateHandler]],
) -> None:
    """设置 get_mail_state handler 获取器（由 DI 容器调用）"""
    global _get_mail_state_handler_getter
    _get_mail_state_handler_getter = getter


def get_mail_state_handler() -> Optional[GetMailStateHandler]:
    """获取 GetMailStateHandler 实例"""
    if _get_mail_state_handler_getter is None:
        return None
    return _get_mail_state_handler_getter()


# ============ Response DTOs ============


class MailStateResponseDTO(BaseModel):
    """邮件状态响应 DTO

    Attributes:
        format: 格式标签
        value: 缓存的状态值（未命中为 null）
        success: 是否成功
    """

    format: str = Field(..., description="格式标签")
    value: Optional[str] = Field(None, description="缓存的状态值")
    success: bool = Field(..., description="是否成功")


# ============ API Endpoints ============


@router.get(
    "/mail-state",
    response_model=MailStateResponseDTO,
    summary="查询邮件状态",
    description="读取本地缓存中当前格式标签对应的邮件状态。未命中时 value 为 null。",
)
def query_mail_state(
    handler: Optional[GetMailStateHandler] = Depends(get_mail_state_handler),
) -> MailStateResponseDTO:
    """查询邮件状态"""
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    try:
        result: MailStateResult = handler.handle(GetMailStateQuery())
    except SchemaUpgradeRequestedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )

    return MailStateResponseDTO(
        format=result.record.format,
        value=result.record.value,
        success=result.success,
    )
