"""
认证容器（AuthContainer）

管理 IMAP 认证相关组件：配置、连接建立服务、凭证校验服务、认证服务。
"""

from dependency_injector import containers, providers

from application.auth.services.imap_authenticator import ImapAuthenticator
from domain.auth.services.credential_checker import CredentialChecker
from infrastructure.auth.services.imaplib_connection_establisher import (
    ImaplibConnectionEstablisher,
)
from infrastructure.config.settings import get_settings


class AuthContainer(containers.DeclarativeContainer):
    """认证容器 - 管理 IMAP 认证服务"""

    # ============ 配置 ============

    settings = providers.Singleton(get_settings)

    auth_options = providers.Callable(
        lambda settings: settings.auth_options,
        settings=settings,
    )

    # ============ 领域服务 ============

    # IMAP 连接建立服务
    connection_establisher = providers.Singleton(ImaplibConnectionEstablisher)

    # 凭证校验服务
    credential_checker = providers.Singleton(CredentialChecker)

    # ============ 应用服务 ============

    # IMAP 认证服务（每次调用新实例：每个调用方使用独立的连接和会话，
    # imaplib 会话登录成功后不能再次 LOGIN）
    imap_authenticator = providers.Factory(
        ImapAuthenticator,
        options=auth_options,
        establisher=connection_establisher,
        checker=credential_checker,
    )
