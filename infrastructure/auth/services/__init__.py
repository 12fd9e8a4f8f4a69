"""IMAP 认证基础设施服务"""

from infrastructure.auth.services.imaplib_session import ImaplibSession
from infrastructure.auth.services.imaplib_connection_establisher import (
    ImaplibConnectionEstablisher,
)

__all__ = [
    "ImaplibSession",
    "ImaplibConnectionEstablisher",
]
