"""
MailHog 容器（MailhogContainer）

管理 MailHog 客户端的依赖：配置、传输层、映射器。

依赖关系：
    settings -> transport -> mailhog_client

传输层自行创建并持有 httpx.Client，关闭客户端时一并关闭连接池。
"""

from typing import Optional

from dependency_injector import containers, providers

from infrastructure.config.settings import Settings
from infrastructure.mailhog.httpx_transport import HttpxTransport
from infrastructure.mailhog.mailhog_client import MailhogClient
from infrastructure.mailhog.message_mapper import MessageMapper
from infrastructure.mailhog.request_factory import DefaultRequestFactory


class MailhogContainer(containers.DeclarativeContainer):
    """MailHog 容器 - 管理客户端及其传输层"""

    # ============ 配置 ============

    settings = providers.Singleton(Settings)

    # ============ HTTP ============

    # 传输层（单例，复用连接池）
    transport = providers.Singleton(
        HttpxTransport,
        timeout=settings.provided.timeout,
    )

    request_factory = providers.Singleton(DefaultRequestFactory)

    # ============ 客户端 ============

    message_mapper = providers.Singleton(MessageMapper)

    # MailHog 客户端（每次请求新实例，共享传输层）
    # 注意: 关闭任一客户端都会关闭共享的传输层
    mailhog_client = providers.Factory(
        MailhogClient,
        transport=transport,
        base_uri=settings.provided.base_url,
        request_factory=request_factory,
        mapper=message_mapper,
        page_size=settings.provided.page_size,
    )


def create_mailhog_client(base_url: Optional[str] = None) -> MailhogClient:
    """
    创建 MailHog 客户端

    客户端独占自己的传输层，使用完毕后需要关闭：
        with create_mailhog_client("http://localhost:8025") as client:
            for message in client.find_all_messages():
                print(message.subject)

    Args:
        base_url: MailHog 地址（可选，不提供则从 MAILHOG_BASE_URL 读取）

    Returns:
        MailhogClient 实例
    """
    container = MailhogContainer()
    if base_url is not None:
        return container.mailhog_client(base_uri=base_url)
    return container.mailhog_client()
