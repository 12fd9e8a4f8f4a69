"""IMAP 连接建立服务接口"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.auth.services.imap_session import ImapSession
from domain.auth.value_objects.imap_auth_options import ImapAuthOptions


class ImapConnectionEstablisher(ABC):
    """
    IMAP 连接建立服务接口

    定义建立 IMAP 会话的契约，具体实现在基础设施层。
    """

    @abstractmethod
    def establish(
        self,
        options: ImapAuthOptions,
        session: Optional[ImapSession] = None,
    ) -> ImapSession:
        """
        建立 IMAP 会话

        在截止时间内完成连接：
        1. 提供了现成会话时原样返回，不发起连接
        2. IMAPS 使用 TLS 连接
        3. IMAP 使用明文连接

        Args:
            options: 认证选项
            session: 调用方提供的现成会话

        Returns:
            可用于登录的会话

        Raises:
            ImapConfigurationException: 协议/主机组合无效
            ImapConnectionException: 连接失败
            ImapConnectionTimeoutException: 连接超时
        """
        raise NotImplementedError
