"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "MailStateBridge"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== 数据库配置 ==========
    # 本地 SQLite 缓存文件位置
    data_dir: str = "data"
    db_name: str = "twobird.db"
    # 结构版本，变更即视为需要重建缓存
    database_version: int = 1

    # ========== 邮件状态 ==========
    mail_state_format: str = "May-22-2019"
    # 为 True 时查询异常报告 success=False，默认沿用 success=True 的掩盖行为
    mail_state_strict_lookup: bool = False

    # ========== 通知转发 ==========
    forward_enabled: bool = False

    # ========== 日志配置 ==========
    log_backend: Literal["simple", "loguru"] = "simple"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_dev(self) -> bool:
        """是否为开发环境"""
        return self.app_env == "dev"

    @property
    def is_staging(self) -> bool:
        """是否为 staging 环境"""
        return self.app_env == "staging"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def use_in_memory_db(self) -> bool:
        """测试环境使用内存数据库"""
        return self.is_test



# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
