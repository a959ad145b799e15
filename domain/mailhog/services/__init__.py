"""MailHog 领域服务模块"""

from domain.mailhog.services.http_transport import (
    HttpRequest,
    HttpResponse,
    HttpTransport,
    RequestFactory,
    TransportError,
)
from domain.mailhog.services.mail_capture_client import MailCaptureClient

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "HttpTransport",
    "RequestFactory",
    "TransportError",
    "MailCaptureClient",
]
