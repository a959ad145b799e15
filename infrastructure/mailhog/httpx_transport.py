"""基于 httpx 的 HTTP 传输实现"""

import logging
from typing import Optional

import httpx

from domain.mailhog.services.http_transport import (
    HttpRequest,
    HttpResponse,
    TransportError,
)


class HttpxTransport:
    """
    基于 httpx 的 HTTP 传输实现

    使用同步 httpx.Client 发送请求。不做重试：
    MailHog 的删除和转发操作有副作用，重试策略由调用方决定。

    Attributes:
        DEFAULT_TIMEOUT: 默认请求超时时间（秒）
    """

    DEFAULT_TIMEOUT: float = 10.0

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化传输

        Args:
            client: 预先配置的 httpx.Client（可选，不提供则自动创建）
            timeout: 请求超时时间（秒），仅在自动创建 client 时使用
            logger: 日志记录器（可选）
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logger or logging.getLogger(__name__)

    def send(self, request: HttpRequest) -> HttpResponse:
        """
        发送 HTTP 请求

        Args:
            request: HTTP 请求

        Returns:
            HttpResponse

        Raises:
            TransportError: 超时、网络错误或非 2xx 响应
        """
        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.body,
            )
        except httpx.TimeoutException as e:
            self._logger.error(f"Request timeout: {request.method} {request.url}")
            raise TransportError(
                method=request.method,
                url=request.url,
                message="Request timeout",
            ) from e
        except httpx.RequestError as e:
            self._logger.error(
                f"Request error: {request.method} {request.url} - {e}"
            )
            raise TransportError(
                method=request.method,
                url=request.url,
                message=f"Request error: {e}",
            ) from e

        if not 200 <= response.status_code < 300:
            self._logger.error(
                f"HTTP {response.status_code}: {request.method} {request.url}"
            )
            raise TransportError(
                method=request.method,
                url=request.url,
                message=f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        return HttpResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        """关闭自动创建的 httpx.Client"""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
