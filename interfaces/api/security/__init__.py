"""API 认证依赖"""

from interfaces.api.security.imap_basic_auth import (
    authenticator_for_request,
    require_imap_user,
    set_authenticator_getter,
    get_authenticator,
)

__all__ = [
    "authenticator_for_request",
    "require_imap_user",
    "set_authenticator_getter",
    "get_authenticator",
]
