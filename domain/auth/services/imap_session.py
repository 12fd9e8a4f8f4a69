"""IMAP 会话能力接口"""

from abc import ABC, abstractmethod
from typing import Any


class ImapSession(ABC):
    """
    IMAP 会话接口

    已建立（但未必已认证）的 IMAP 连接，只需要支持一次 LOGIN 命令。
    调用方自行构造的会话无需继承本类，只要提供 login/errstr 即可。
    """

    @abstractmethod
    def login(self, username: str, password: str) -> bool:
        """
        执行 LOGIN 命令

        Returns:
            True 如果服务器接受凭证
        """
        raise NotImplementedError

    @abstractmethod
    def errstr(self) -> str:
        """最近一次失败的错误描述，没有时返回空字符串"""
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is ImapSession:
            if all(callable(getattr(subclass, name, None)) for name in ("login", "errstr")):
                return True
        return NotImplemented
