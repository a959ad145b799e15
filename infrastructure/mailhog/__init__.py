"""
MailHog 基础设施层

提供 MailHog HTTP API 客户端、httpx 传输和邮件记录映射器。
"""

from .httpx_transport import HttpxTransport
from .mailhog_client import MailhogClient
from .message_mapper import MessageMapper
from .request_factory import DefaultRequestFactory

__all__ = [
    "DefaultRequestFactory",
    "HttpxTransport",
    "MailhogClient",
    "MessageMapper",
]
