"""
配置容器（ConfigContainer）

提供应用配置，供其他容器通过 DependenciesContainer 引用。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import get_settings


class ConfigContainer(containers.DeclarativeContainer):
    """配置容器"""

    settings = providers.Singleton(get_settings)
