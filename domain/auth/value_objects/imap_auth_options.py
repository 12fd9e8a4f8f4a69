"""IMAP 认证选项值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.auth.value_objects.imap_protocol import ImapProtocol
from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException

DEFAULT_TIMEOUT = 90.0


@dataclass(frozen=True)
class ImapAuthOptions(BaseValueObject):
    """
    IMAP 认证选项值对象

    封装建立 IMAP 会话并校验凭证所需的配置。

    Attributes:
        host: IMAP 服务器地址（提供现成会话时可省略）
        protocol: "IMAP" 或 "IMAPS"，默认 "IMAP"
        timeout: 连接超时（秒），未设置时使用 DEFAULT_TIMEOUT
        escape_slash: 发送前是否将密码中的反斜杠加倍，默认 True
        port: IMAP 端口，未设置时由 imaplib 决定（143/993）
    """

    host: Optional[str] = None
    protocol: Optional[str] = ImapProtocol.IMAP.value
    timeout: Optional[float] = None
    escape_slash: bool = True
    port: Optional[int] = None

    def validate(self) -> None:
        """验证认证选项的有效性"""
        if self.host is not None and not isinstance(self.host, str):
            raise InvalidValueObjectException(
                value_object_type="ImapAuthOptions",
                value=self.host,
                reason=f"IMAP host must be a string, got {type(self.host).__name__}"
            )

        if self.host is not None and not self.host.strip():
            raise InvalidValueObjectException(
                value_object_type="ImapAuthOptions",
                value=self.host,
                reason="IMAP host cannot be empty"
            )

        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
                raise InvalidValueObjectException(
                    value_object_type="ImapAuthOptions",
                    value=self.timeout,
                    reason=f"Timeout must be a number, got {type(self.timeout).__name__}"
                )
            if self.timeout <= 0:
                raise InvalidValueObjectException(
                    value_object_type="ImapAuthOptions",
                    value=self.timeout,
                    reason=f"Timeout must be positive, got {self.timeout}"
                )

        if self.port is not None and (isinstance(self.port, bool) or not isinstance(self.port, int)):
            raise InvalidValueObjectException(
                value_object_type="ImapAuthOptions",
                value=self.port,
                reason=f"Port must be an integer, got {type(self.port).__name__}"
            )

        if self.port is not None and not 1 <= self.port <= 65535:
            raise InvalidValueObjectException(
                value_object_type="ImapAuthOptions",
                value=self.port,
                reason=f"Invalid port number: {self.port}. Must be between 1 and 65535"
            )

        if self.protocol is not None:
            ImapProtocol.parse(self.protocol)

    @property
    def imap_protocol(self) -> Optional[ImapProtocol]:
        """解析后的协议枚举，未设置时为 None"""
        if self.protocol is None:
            return None
        return ImapProtocol.parse(self.protocol)

    @property
    def effective_timeout(self) -> float:
        """连接截止时间（秒）"""
        return self.timeout if self.timeout is not None else DEFAULT_TIMEOUT

    @property
    def connection_string(self) -> str:
        """返回连接字符串格式"""
        scheme = (self.protocol or "imap").lower()
        if self.port is None:
            return f"{scheme}://{self.host}"
        return f"{scheme}://{self.host}:{self.port}"
