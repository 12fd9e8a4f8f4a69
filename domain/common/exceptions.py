"""领域异常定义"""

from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类

    Attributes:
        message: 错误消息
        code: 错误代码（供接口层映射）
    """

    default_code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class InvalidOperationException(DomainException):
    """非法操作异常（不应出现的内部状态）"""

    default_code = "INVALID_OPERATION"


class ImapConfigurationException(DomainException):
    """IMAP 认证配置错误（协议/主机/会话组合无效）"""

    default_code = "IMAP_CONFIG_ERROR"


class InvalidValueObjectException(ImapConfigurationException):
    """值对象校验失败"""

    default_code = "INVALID_VALUE_OBJECT"

    def __init__(self, value_object_type: str, value: Any, reason: str):
        super().__init__(message=f"Invalid {value_object_type}: {reason}")
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason


class ImapConnectionException(DomainException):
    """
    IMAP 连接异常

    Attributes:
        server: IMAP 服务器地址
        port: IMAP 服务器端口（未指定时为 None）
    """

    default_code = "IMAP_CONNECTION_ERROR"

    def __init__(
        self,
        message: str,
        server: Optional[str] = None,
        port: Optional[int] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message=message, code=code)
        self.server = server
        self.port = port


class ImapConnectionTimeoutException(ImapConnectionException):
    """IMAP 连接超时"""

    default_code = "IMAP_CONNECTION_TIMEOUT"
