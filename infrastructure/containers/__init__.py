"""
依赖注入容器

用法：
    from infrastructure.containers import bootstrap, shutdown

    boot = bootstrap()
    handler = boot.app.get_mail_state_handler()
    ...
    shutdown(boot)
"""

from dataclasses import dataclass
from typing import Optional

from dependency_injector import providers

from infrastructure.config.settings import Settings
from .application import AppContainer
from .config import ConfigContainer
from .infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已装配的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    创建并装配所有容器

    Args:
        settings: 可选的配置实例，不提供则从环境变量读取

    Returns:
        Bootstrap 容器集合
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(providers.Object(settings))

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


def shutdown(boot: Bootstrap) -> None:
    """释放基础设施资源（关闭数据库句柄）"""
    boot.infra.mail_state_database().close()


__all__ = [
    "AppContainer",
    "Bootstrap",
    "ConfigContainer",
    "InfraContainer",
    "bootstrap",
    "shutdown",
]
