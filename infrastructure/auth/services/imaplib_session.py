"""基于 imaplib 的 IMAP 会话"""

import imaplib
import logging
from typing import Optional

from domain.auth.services.imap_session import ImapSession

IMAP4Error = imaplib.IMAP4.error


class ImaplibSession(ImapSession):
    """
    imaplib 连接适配器

    将 imaplib.IMAP4 / IMAP4_SSL 连接适配为 ImapSession。
    登录失败（NO/BAD 响应）和登录过程中的传输错误都返回 False，
    错误描述通过 errstr() 获取。
    """

    def __init__(
        self,
        connection: imaplib.IMAP4,
        logger: Optional[logging.Logger] = None,
    ):
        self._connection = connection
        self._logger = logger or logging.getLogger(__name__)
        self._errstr = ""

    @property
    def connection(self) -> imaplib.IMAP4:
        """底层 imaplib 连接"""
        return self._connection

    def login(self, username: str, password: str) -> bool:
        try:
            status, data = self._connection.login(username, password)
        except IMAP4Error as e:
            self._errstr = str(e)
            return False
        except OSError as e:
            self._logger.warning(f"Transport error during IMAP login: {e}")
            self._errstr = str(e)
            return False

        if status != "OK":
            self._errstr = _decode_response(data) or f"LOGIN returned {status}"
            return False

        self._errstr = ""
        return True

    def errstr(self) -> str:
        return self._errstr

    def logout(self) -> None:
        """关闭连接，忽略已断开的连接产生的错误"""
        try:
            self._connection.logout()
        except (IMAP4Error, OSError) as e:
            self._logger.debug(f"Error while closing IMAP connection: {e}")


def _decode_response(data) -> str:
    if not data:
        return ""
    parts = []
    for item in data:
        if isinstance(item, bytes):
            parts.append(item.decode("utf-8", errors="replace"))
        elif item is not None:
            parts.append(str(item))
    return " ".join(parts)
