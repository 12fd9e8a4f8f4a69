"""
IMAP 认证界限上下文

提供通过 IMAP/IMAPS 登录校验用户凭证的领域模型，包括：
- ImapAuthOptions 值对象
- ImapProtocol 枚举
- ImapSession 会话能力接口
- CredentialChecker 凭证校验领域服务
"""

from domain.auth.value_objects.imap_protocol import ImapProtocol
from domain.auth.value_objects.imap_auth_options import ImapAuthOptions
from domain.auth.services.imap_session import ImapSession
from domain.auth.services.credential_checker import CredentialChecker, escape_password

__all__ = [
    "ImapProtocol",
    "ImapAuthOptions",
    "ImapSession",
    "CredentialChecker",
    "escape_password",
]
