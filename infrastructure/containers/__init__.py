"""依赖注入容器"""

from infrastructure.containers.auth import AuthContainer

__all__ = ["AuthContainer"]
