"""
IMAP Auth Service - API 入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 8000 --reload

配置通过环境变量或 .env 文件：
    IMAP_HOST=imap.example.com
    IMAP_PROTOCOL=IMAPS
    IMAP_TIMEOUT=10
"""

from infrastructure.containers import AuthContainer
from infrastructure.logging import configure_logging
from interfaces.api import create_app

container = AuthContainer()
settings = container.settings()
configure_logging(settings)

# 每个请求建立独立的 IMAP 连接，请求结束后登出
app = create_app(
    title=settings.app_name,
    version=settings.app_version,
    authenticator_getter=container.imap_authenticator,
)


if __name__ == "__main__":
    import uvicorn

    print("=" * 50)
    print("启动 IMAP Auth Service")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  POST /api/v1/auth/verify  - 校验 IMAP 凭证")
    print("  GET  /api/v1/auth/me      - HTTP Basic 认证（IMAP 登录）")
    print()
    print("文档: http://localhost:8000/docs")
    print("=" * 50)

    uvicorn.run(app, host="0.0.0.0", port=8000)
