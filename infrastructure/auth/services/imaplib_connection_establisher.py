"""IMAP 连接建立服务实现"""

import imaplib
import logging
import socket
import ssl
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Optional

from domain.auth.services.imap_connection_establisher import ImapConnectionEstablisher
from domain.auth.services.imap_session import ImapSession
from domain.auth.services.option_validator import validate_connection_source
from domain.auth.value_objects.imap_auth_options import ImapAuthOptions
from domain.auth.value_objects.imap_protocol import ImapProtocol
from domain.common.exceptions import (
    ImapConnectionException,
    ImapConnectionTimeoutException,
)
from infrastructure.auth.services.imaplib_session import ImaplibSession

IMAP4Error = imaplib.IMAP4.error


class ImaplibConnectionEstablisher(ImapConnectionEstablisher):
    """
    IMAP 连接建立服务实现

    使用 Python 标准库 imaplib 建立连接。imaplib 在服务器接受连接但
    不发送问候行时会一直阻塞，因此连接在工作线程中进行，调用方在
    截止时间内等待结果：
    - 截止时间只作用于本次调用，不使用进程级信号
    - 无论成功、失败还是超时，线程池都在 finally 中关闭
    - 超时后才完成的连接会被自动登出
    """

    def __init__(
        self,
        ssl_context_factory: Callable[[], ssl.SSLContext] = ssl.create_default_context,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化连接建立服务

        Args:
            ssl_context_factory: IMAPS 连接使用的 SSL 上下文工厂
            logger: 可选的日志记录器
        """
        self._ssl_context_factory = ssl_context_factory
        self._logger = logger or logging.getLogger(__name__)

    def establish(
        self,
        options: ImapAuthOptions,
        session: Optional[ImapSession] = None,
    ) -> ImapSession:
        validate_connection_source(options, session)

        if session is not None:
            self._logger.info(
                f"Setting up with user provided IMAP object {type(session).__name__}"
            )
            return session

        protocol = options.imap_protocol
        if protocol is ImapProtocol.IMAPS:
            self._logger.info(f"Setting up with IMAPS ({options.connection_string})")
        else:
            self._logger.info(f"Setting up with IMAP, no SSL ({options.connection_string})")

        connection = self._run_with_deadline(
            lambda: self._open(options, protocol),
            options,
            protocol,
        )
        return ImaplibSession(connection, logger=self._logger)

    def _run_with_deadline(
        self,
        connect: Callable[[], imaplib.IMAP4],
        options: ImapAuthOptions,
        protocol: Optional[ImapProtocol],
    ) -> imaplib.IMAP4:
        """
        在截止时间内执行连接

        Raises:
            ImapConnectionException: 连接失败
            ImapConnectionTimeoutException: 超过截止时间
        """
        deadline = options.effective_timeout
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="imap-connect-")
        future = executor.submit(connect)
        try:
            return future.result(timeout=deadline)
        except (FutureTimeoutError, socket.timeout):
            self._logger.error(
                f"Timed out after {deadline}s connecting to {options.connection_string}"
            )
            future.add_done_callback(self._discard_late_connection)
            raise ImapConnectionTimeoutException(
                message=_timeout_message(protocol),
                server=options.host,
                port=options.port,
            )
        except socket.gaierror as e:
            raise self._connection_error(options, protocol, f"Failed to resolve hostname: {e}")
        except ssl.SSLError as e:
            raise self._connection_error(options, protocol, f"SSL/TLS error: {e}")
        except ConnectionRefusedError:
            raise self._connection_error(options, protocol, "Connection refused by server")
        except (IMAP4Error, OSError) as e:
            raise self._connection_error(options, protocol, str(e))
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def _open(self, options: ImapAuthOptions, protocol: Optional[ImapProtocol]) -> imaplib.IMAP4:
        # 传输层超时与截止时间一致，保证工作线程最终退出
        timeout = options.effective_timeout

        if protocol is ImapProtocol.IMAPS:
            return imaplib.IMAP4_SSL(
                host=options.host,
                port=options.port or imaplib.IMAP4_SSL_PORT,
                ssl_context=self._ssl_context_factory(),
                timeout=timeout,
            )
        return imaplib.IMAP4(
            host=options.host,
            port=options.port or imaplib.IMAP4_PORT,
            timeout=timeout,
        )

    def _connection_error(
        self,
        options: ImapAuthOptions,
        protocol: Optional[ImapProtocol],
        reason: str,
    ) -> ImapConnectionException:
        label = protocol.value if protocol else "IMAP"
        self._logger.error(f"Unable to connect to {options.connection_string}: {reason}")
        return ImapConnectionException(
            message=f"Unable to connect to {label}: {reason}",
            server=options.host,
            port=options.port,
        )

    def _discard_late_connection(self, future: Future) -> None:
        if future.cancelled() or future.exception() is not None:
            return
        self._logger.warning("Closing IMAP connection that completed after the deadline")
        ImaplibSession(future.result(), logger=self._logger).logout()


def _timeout_message(protocol: Optional[ImapProtocol]) -> str:
    if protocol is None:
        return "timeout while connecting to server"
    return f"timeout while connecting to {protocol.value} server"
