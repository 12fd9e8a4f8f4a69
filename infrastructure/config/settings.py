"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.auth.value_objects.imap_auth_options import ImapAuthOptions


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "ImapAuth"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== IMAP 认证配置 ==========
    imap_host: Optional[str] = None
    imap_port: Optional[int] = None
    # 默认为明文 IMAP，生产环境请显式设置为 IMAPS
    imap_protocol: Optional[str] = "IMAP"
    imap_timeout: Optional[float] = None
    imap_escape_slash: bool = True

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = ""

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
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def auth_options(self) -> ImapAuthOptions:
        """
        构建 IMAP 认证选项

        Raises:
            InvalidValueObjectException: 配置值无效
            ImapConfigurationException: 协议无效
        """
        return ImapAuthOptions(
            host=self.imap_host,
            protocol=self.imap_protocol,
            timeout=self.imap_timeout,
            escape_slash=self.imap_escape_slash,
            port=self.imap_port,
        )


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


def reset_settings() -> None:
    """清除缓存的配置实例（测试用）"""
    global _settings
    _settings = None
