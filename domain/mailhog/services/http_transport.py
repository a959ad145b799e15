"""HTTP 传输层接口"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol


@dataclass(frozen=True)
class HttpRequest:
    """HTTP 请求

    Attributes:
        method: HTTP 方法（GET、POST、DELETE ...）
        url: 完整请求 URL（含查询参数）
        headers: 请求头
        body: 请求体（可选）
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(frozen=True)
class HttpResponse:
    """HTTP 响应

    Attributes:
        status_code: HTTP 状态码
        body: 响应体文本
    """

    status_code: int
    body: str = ""


class HttpTransport(Protocol):
    """HTTP 传输接口

    定义发送 HTTP 请求的契约。
    超时、重试、TLS 等策略由实现类负责，客户端不做任何重试。
    """

    def send(self, request: HttpRequest) -> HttpResponse:
        """发送请求

        Args:
            request: HTTP 请求

        Returns:
            HttpResponse 包含状态码和响应体

        Raises:
            TransportError: 网络错误或 HTTP 错误
        """
        ...


class RequestFactory(Protocol):
    """HTTP 请求构建接口"""

    def create_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> HttpRequest:
        """构建 HTTP 请求"""
        ...


class TransportError(Exception):
    """HTTP 传输错误"""

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: Optional[int] = None,
    ):
        self.method = method
        self.url = url
        self.status_code = status_code
        super().__init__(f"{method} {url} failed - {message}")
