"""IMAP 认证值对象模块"""

from domain.auth.value_objects.imap_protocol import ImapProtocol
from domain.auth.value_objects.imap_auth_options import ImapAuthOptions

__all__ = [
    "ImapProtocol",
    "ImapAuthOptions",
]
