"""推送通知接收 API 路由"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from application.notification.services.mail_state_update_service import UpdateResult
from application.notification.services.notification_event_dispatcher import (
    NotificationEventDispatcher,
)
from domain.common.exceptions import SchemaUpgradeRequestedError
from domain.notification.value_objects.notification_event_type import NotificationEventType
from domain.notification.value_objects.received_notification import (
    NotificationPayload,
    ReceivedNotification,
)


router = APIRouter(tags=["Notifications"])


# ============ Dispatcher 依赖注入 ============

_dispatcher_getter: Optional[Callable[[], NotificationEventDispatcher]] = None


def set_dispatcher_getter(
    getter: Optional[Callable[[], NotificationEventDispatcher]],
) -> None:
    """设置事件分发器获取器（由 DI 容器调用）"""
    global _dispatcher_getter
    _dispatcher_getter = getter


def get_dispatcher() -> Optional[NotificationEventDispatcher]:
    """获取 NotificationEventDispatcher 实例"""
    if _dispatcher_getter is None:
        return None
    return _dispatcher_getter()


# ============ Request/Response DTOs ============


class NotificationPayloadDTO(BaseModel):
    """通知载荷 DTO"""

    model_config = ConfigDict(populate_by_name=True)

    raw_payload: str = Field("", alias="rawPayload", description="原始 JSON 载荷")
    notification_id: Optional[str] = Field(
        None, alias="notificationID", description="通知 ID"
    )
    title: Optional[str] = Field(None, description="标题")
    body: Optional[str] = Field(None, description="正文")


class NotificationEventRequestDTO(BaseModel):
    """通知事件请求 DTO"""

    model_config = ConfigDict(populate_by_name=True)

    payload: NotificationPayloadDTO = Field(default_factory=NotificationPayloadDTO)
    is_app_in_focus: bool = Field(False, alias="isAppInFocus", description="应用是否在前台")
    shown: bool = Field(False, description="是否已展示")

    def to_notification(self) -> ReceivedNotification:
        return ReceivedNotification(
            payload=NotificationPayload(
                raw_payload=self.payload.raw_payload,
                notification_id=self.payload.notification_id,
                title=self.payload.title,
                body=self.payload.body,
            ),
            is_app_in_focus=self.is_app_in_focus,
            shown=self.shown,
        )


class NotificationHandledResponseDTO(BaseModel):
    """通知已处理响应 DTO（状态码 200）"""

    recipient: Optional[str] = Field(None, description="收件人")
    state: Optional[str] = Field(None, description="邮件状态")
    success: bool = Field(..., description="查询是否成功")
    forwarded: bool = Field(False, description="是否已转发到远程查询服务")


class NotificationCachedResponseDTO(BaseModel):
    """通知已缓存响应 DTO（状态码 202）"""

    event: str = Field(..., description="事件类型")
    status: str = Field(default="cached", description="状态")


# ============ API Endpoints ============


@router.post(
    "/notifications/{event_type}",
    responses={
        200: {"model": NotificationHandledResponseDTO, "description": "通知已处理"},
        202: {"model": NotificationCachedResponseDTO, "description": "尚无监听器，事件已缓存"},
        400: {"description": "不支持的事件类型"},
        503: {"description": "本地缓存需要重建"},
    },
    summary="接收推送通知事件",
)
def receive_notification(
    event_type: str,
    event_request: NotificationEventRequestDTO,
    dispatcher: Optional[NotificationEventDispatcher] = Depends(get_dispatcher),
):
    """
    接收宿主推送框架投递的通知事件

    - received 事件会查询邮件状态并提取 recipient
    - 没有监听器的事件会被缓存，监听器注册后回放
    """
    if dispatcher is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Dispatcher not configured. Please configure dependency injection.",
        )

    try:
        event = NotificationEventType.parse(event_type)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        outcome = dispatcher.dispatch(event, event_request.to_notification())
    except SchemaUpgradeRequestedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )

    if not outcome.delivered:
        return JSONResponse(
            status_code=status.HTTP_202_ACCEPTED,
            content={"event": event.value, "status": "cached"},
        )

    result = outcome.result
    if isinstance(result, UpdateResult):
        return NotificationHandledResponseDTO(
            recipient=result.recipient,
            state=result.state,
            success=result.lookup.success,
            forwarded=result.forward.forwarded if result.forward else False,
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"event": event.value, "status": "delivered"},
    )
