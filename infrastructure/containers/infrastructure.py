"""
基础设施容器（InfraContainer）

管理所有基础设施组件：数据库句柄、仓储实现、外部服务客户端等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.database.mail_state_database import MailStateDatabase
from infrastructure.mailstate.repositories.sqlalchemy_mail_state_repository import (
    SqlAlchemyMailStateRepository,
)


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 数据库 ============

    # 邮件状态数据库句柄（单例，延迟打开，关闭时由 shutdown() 释放）
    mail_state_database = providers.Singleton(
        MailStateDatabase,
        data_dir=config.settings.provided.data_dir,
        db_name=config.settings.provided.db_name,
        version=config.settings.provided.database_version,
        in_memory=config.settings.provided.use_in_memory_db,
    )

    # ============ 仓储 ============

    # 邮件状态仓储
    mail_state_repository = providers.Factory(
        SqlAlchemyMailStateRepository,
        database=mail_state_database,
        format_tag=config.settings.provided.mail_state_format,
        strict=config.settings.provided.mail_state_strict_lookup,
    )

    # ============ 外部服务 ============

    # 远程邮件查询客户端：协议未定义，默认不提供
    # 部署时可通过 mail_query_client.override(...) 注入
    mail_query_client = providers.Object(None)
