"""连接来源校验"""

from typing import Any, Optional

from domain.auth.value_objects.imap_auth_options import ImapAuthOptions
from domain.common.exceptions import ImapConfigurationException


def validate_connection_source(options: ImapAuthOptions, session: Optional[Any] = None) -> None:
    """
    校验会话的创建方式

    提供现成会话时使用该会话，否则必须同时给出 host 和 protocol。
    校验在任何网络活动之前完成。

    Raises:
        ImapConfigurationException: 组合无效
    """
    if session is not None:
        missing = [
            name for name in ("login", "errstr")
            if not callable(getattr(session, name, None))
        ]
        if missing:
            raise ImapConfigurationException(
                message=(
                    f"IMAP session object {type(session).__name__} "
                    f"does not support: {', '.join(missing)}"
                )
            )
        return

    if options.protocol is None:
        raise ImapConfigurationException(message="A protocol or an imap object is required")

    if options.host is None:
        raise ImapConfigurationException(
            message=f"A host is required for protocol '{options.protocol}'"
        )
