"""
FastAPI 应用工厂

装配 DI 容器、注册路由，并在应用关闭时释放数据库句柄。
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from application.notification.services.mail_state_update_service import MailStateUpdateService
from common.logging import get_logger, setup_logging
from domain.notification.value_objects.notification_event_type import NotificationEventType
from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap, shutdown
from interfaces.api.routes import mail_state_router, notifications_router
from interfaces.api.routes.mail_state import set_get_mail_state_handler_getter
from interfaces.api.routes.notifications import set_dispatcher_getter


def wire_routes(boot: Bootstrap) -> None:
    """
    将容器中的 Handler/服务连接到路由

    - GET /mail-state 使用 get_mail_state_handler
    - POST /notifications/{event} 使用单例事件分发器，
      received 与 opened 事件均由 MailStateUpdateService 处理
    """
    set_get_mail_state_handler_getter(boot.app.get_mail_state_handler)
    set_dispatcher_getter(boot.app.notification_event_dispatcher)

    dispatcher = boot.app.notification_event_dispatcher()
    update_service: MailStateUpdateService = boot.app.mail_state_update_service()
    dispatcher.add_listener(NotificationEventType.RECEIVED, update_service.update_for_payload)
    dispatcher.add_listener(NotificationEventType.OPENED, update_service.record_opened)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        settings: 可选的配置实例，不提供则从环境变量读取

    Returns:
        FastAPI 应用
    """
    settings = settings or get_settings()
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        backend=settings.log_backend,
    )
    logger = get_logger(__name__)

    boot = bootstrap(settings)
    wire_routes(boot)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} ({settings.app_env})")
        yield
        shutdown(boot)
        set_get_mail_state_handler_getter(None)
        set_dispatcher_getter(None)
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        description="推送通知邮件状态桥接服务",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.bootstrap = boot

    app.include_router(mail_state_router, prefix="/api/v1")
    app.include_router(notifications_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "healthy"}

    return app
