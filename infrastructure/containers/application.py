"""
应用容器（AppContainer）

管理应用层组件：查询处理器、应用服务等。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.handlers.mailstate.get_mail_state_handler import GetMailStateHandler
from application.notification.services.mail_state_update_service import MailStateUpdateService
from application.notification.services.notification_event_dispatcher import (
    NotificationEventDispatcher,
)
from application.notification.services.notification_forwarder import NotificationForwarder


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 查询处理器 ============

    get_mail_state_handler = providers.Factory(
        GetMailStateHandler,
        repository=infra.mail_state_repository,
    )

    # ============ 应用服务 ============

    notification_forwarder = providers.Factory(
        NotificationForwarder,
        query_client=infra.mail_query_client,
    )

    mail_state_update_service = providers.Factory(
        MailStateUpdateService,
        repository=infra.mail_state_repository,
        forwarder=notification_forwarder,
        forward_enabled=config.settings.provided.forward_enabled,
    )

    # 事件分发器（单例，监听器与缓存需要跨请求保留）
    notification_event_dispatcher = providers.Singleton(NotificationEventDispatcher)
