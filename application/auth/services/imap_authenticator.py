"""IMAP 认证应用服务"""

import logging
import threading
from typing import TYPE_CHECKING, Optional

from domain.auth.services.credential_checker import CredentialChecker
from domain.auth.services.imap_connection_establisher import ImapConnectionEstablisher
from domain.auth.services.imap_session import ImapSession
from domain.auth.services.option_validator import validate_connection_source
from domain.auth.value_objects.imap_auth_options import ImapAuthOptions

if TYPE_CHECKING:
    from infrastructure.config.settings import Settings


class ImapAuthenticator:
    """
    IMAP 认证服务

    构造时校验选项并建立一次会话，之后每次 authenticate() 都在同一个
    会话上尝试登录。构造阶段的配置/连接/超时错误直接抛出；认证阶段
    的失败只返回 False。

    用法:
        authenticator = ImapAuthenticator(
            ImapAuthOptions(host="imap.example.com", protocol="IMAPS")
        )
        if authenticator.authenticate(username, password):
            ...
    """

    def __init__(
        self,
        options: ImapAuthOptions,
        session: Optional[ImapSession] = None,
        establisher: Optional[ImapConnectionEstablisher] = None,
        checker: Optional[CredentialChecker] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化认证服务

        Args:
            options: 认证选项
            session: 调用方提供的现成会话（提供时不再自行连接）
            establisher: 连接建立服务，默认使用 imaplib 实现
            checker: 凭证校验服务
            logger: 可选的日志记录器

        Raises:
            ImapConfigurationException: 选项组合无效
            ImapConnectionException: 无法连接服务器
            ImapConnectionTimeoutException: 连接超时
        """
        self._logger = logger or logging.getLogger(__name__)
        self._logger.debug("Starting IMAP authenticator initialisation")

        validate_connection_source(options, session)

        if establisher is None:
            from infrastructure.auth.services.imaplib_connection_establisher import (
                ImaplibConnectionEstablisher,
            )
            establisher = ImaplibConnectionEstablisher(logger=self._logger)

        self._options = options
        self._checker = checker or CredentialChecker(logger=self._logger)
        self._session: Optional[ImapSession] = establisher.establish(options, session)
        # 调用方提供的会话由调用方负责关闭
        self._owns_session = session is None
        self._lock = threading.Lock()
        self._last_error: Optional[str] = None

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        logger: Optional[logging.Logger] = None,
    ) -> "ImapAuthenticator":
        """根据应用配置创建认证服务"""
        return cls(settings.auth_options, logger=logger)

    @property
    def options(self) -> ImapAuthOptions:
        return self._options

    @property
    def session(self) -> Optional[ImapSession]:
        return self._session

    @property
    def last_error(self) -> Optional[str]:
        """最近一次认证失败时会话报告的错误，成功后清空"""
        return self._last_error

    def authenticate(self, username: str, password: str) -> bool:
        """
        校验用户名和密码

        Returns:
            True 如果登录成功，否则 False
        """
        with self._lock:
            self._logger.debug("Starting check routine")
            ok, self._last_error = self._checker.check_with_detail(
                self._session,
                username,
                password,
                escape_slash=self._options.escape_slash,
            )
            return ok

    def close(self) -> None:
        """
        登出自行建立的会话

        imaplib 连接登录成功后进入 AUTH 状态，不能再次 LOGIN，
        因此每个调用方使用完认证服务后应关闭它。调用方提供的会话不受影响。
        """
        with self._lock:
            session, self._session = self._session, None
        if session is None or not self._owns_session:
            return
        logout = getattr(session, "logout", None)
        if callable(logout):
            logout()

    def __enter__(self) -> "ImapAuthenticator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
