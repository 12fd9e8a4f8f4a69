"""凭证校验领域服务"""

import imaplib
import logging
from typing import Optional, Tuple

from domain.auth.services.imap_session import ImapSession
from domain.common.exceptions import InvalidOperationException

# 登录过程中的传输/协议错误，与凭证错误一样折叠为 False
LOGIN_ERRORS = (imaplib.IMAP4.error, OSError)


def escape_password(password: str) -> str:
    """将密码中的每个反斜杠替换为两个反斜杠"""
    return password.replace("\\", "\\\\")


def session_errstr(session: ImapSession) -> str:
    """读取会话的错误描述，读取失败时返回空字符串"""
    try:
        return session.errstr() or ""
    except LOGIN_ERRORS:
        return ""


class CredentialChecker:
    """
    凭证校验服务

    对已建立的会话发起一次登录尝试，将结果映射为布尔值。
    凭证错误与登录过程中的传输错误不作区分，均返回 False。
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def check(
        self,
        session: Optional[ImapSession],
        username: str,
        password: str,
        escape_slash: bool = True,
    ) -> bool:
        """
        校验用户名和密码

        Args:
            session: 已建立的 IMAP 会话
            username: 用户名（空字符串合法，交由服务器拒绝）
            password: 密码明文
            escape_slash: 是否先将反斜杠加倍

        Returns:
            True 如果登录成功

        Raises:
            InvalidOperationException: 会话缺失或参数不是字符串
        """
        ok, _ = self.check_with_detail(session, username, password, escape_slash)
        return ok

    def check_with_detail(
        self,
        session: Optional[ImapSession],
        username: str,
        password: str,
        escape_slash: bool = True,
    ) -> Tuple[bool, Optional[str]]:
        """
        校验用户名和密码，并返回失败时的错误描述

        Returns:
            (是否登录成功, 错误描述)，成功时错误描述为 None
        """
        if session is None:
            raise InvalidOperationException(
                message="No IMAP session available: authenticator was not initialised"
            )
        if not isinstance(username, str) or not isinstance(password, str):
            raise InvalidOperationException(
                message="Username and password must be strings",
                code="INVALID_CREDENTIALS_INPUT",
            )

        if escape_slash:
            password = escape_password(password)

        self._logger.info(f"Attempting to authenticate user '{username}'")
        try:
            ok = session.login(username, password)
        except LOGIN_ERRORS as e:
            self._logger.warning(f"Error during IMAP login for '{username}': {e}")
            return False, str(e) or type(e).__name__

        if ok:
            self._logger.info(f"Successfully logged in '{username}'")
            return True, None

        detail = session_errstr(session)
        self._logger.info(f"Failed to authenticate user '{username}': {detail}")
        return False, detail or None
