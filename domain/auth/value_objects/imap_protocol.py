"""IMAP 协议枚举"""

from enum import Enum
from typing import Union

from domain.common.exceptions import ImapConfigurationException


class ImapProtocol(str, Enum):
    """IMAP 协议类型枚举"""

    IMAP = "IMAP"
    """明文 IMAP（默认端口 143）"""

    IMAPS = "IMAPS"
    """TLS 包装的 IMAP（默认端口 993）"""

    @property
    def use_ssl(self) -> bool:
        return self is ImapProtocol.IMAPS

    @classmethod
    def parse(cls, value: Union["ImapProtocol", str]) -> "ImapProtocol":
        """
        解析协议值

        只接受枚举成员或与其完全一致的字符串（区分大小写）。

        Raises:
            ImapConfigurationException: 协议不是 IMAP 或 IMAPS
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ImapConfigurationException(
                message=f"Valid protocols are 'IMAP' and 'IMAPS', not '{value}'"
            )
