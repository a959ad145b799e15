"""MailHog HTTP API 客户端实现"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from domain.mailhog.services.http_transport import (
    HttpTransport,
    RequestFactory,
    TransportError,
)
from domain.mailhog.services.mail_capture_client import MailCaptureClient
from domain.message.exceptions import (
    MappingError,
    NoSuchMessageError,
    SerializationError,
)
from domain.message.value_objects.message import Message
from infrastructure.mailhog.message_mapper import MessageMapper
from infrastructure.mailhog.request_factory import DefaultRequestFactory


@dataclass(frozen=True)
class PageResult:
    """列表接口的一页响应"""

    count: int
    total: int
    items: List[Dict[str, Any]]


class MailhogClient(MailCaptureClient):
    """
    MailHog HTTP API 客户端

    通过注入的传输层访问 MailHog，支持：
    - 分页遍历全部邮件（惰性生成器）
    - 获取最新邮件、邮件总数、按 ID 获取邮件
    - 清空邮箱、将邮件转发到真实 SMTP 服务器

    客户端只保存不可变配置，不缓存任何邮件，不做重试。
    """

    DEFAULT_PAGE_SIZE = 50

    def __init__(
        self,
        transport: HttpTransport,
        base_uri: str,
        request_factory: Optional[RequestFactory] = None,
        mapper: Optional[MessageMapper] = None,
        logger: Optional[logging.Logger] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """
        初始化客户端

        Args:
            transport: HTTP 传输实现
            base_uri: MailHog 地址，如 http://localhost:8025（末尾的 / 会被去掉）
            request_factory: 请求构建器（可选）
            mapper: 邮件记录映射器（可选）
            logger: 日志记录器（可选）
            page_size: find_all_messages 默认的每页邮件数量
        """
        self._transport = transport
        self._base_uri = base_uri.rstrip("/")
        self._request_factory = request_factory or DefaultRequestFactory()
        self._mapper = mapper or MessageMapper()
        self._logger = logger or logging.getLogger(__name__)

        self._require_positive("page_size", page_size)
        self._page_size = page_size

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def page_size(self) -> int:
        return self._page_size

    def close(self) -> None:
        """关闭传输层（如果传输层支持 close）"""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "MailhogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ============ 查询 ============

    def find_all_messages(self, page_size: Optional[int] = None) -> Iterator[Message]:
        """
        按服务器顺序惰性遍历所有邮件

        只有当某一页报告 count == 0 时才结束。
        每页之后偏移量增加 page_size（而不是实际返回的数量）。

        Args:
            page_size: 每页邮件数量（可选，默认使用构造时的 page_size）

        Yields:
            Message
        """
        if page_size is None:
            page_size = self._page_size
        self._require_positive("page_size", page_size)

        start = 0
        while True:
            page = self._get_page(
                f"{self._base_uri}/api/v2/messages?limit={page_size}&start={start}"
            )

            if page.count == 0:
                self._logger.debug(f"No more messages after offset {start}")
                return

            for item in page.items:
                yield self._mapper.map(item)

            start += page_size

    def find_latest_messages(self, number_of_messages: int) -> List[Message]:
        """
        获取最新的 N 封邮件

        Args:
            number_of_messages: 邮件数量

        Returns:
            Message 列表（服务器顺序）
        """
        self._require_positive("number_of_messages", number_of_messages)

        page = self._get_page(
            f"{self._base_uri}/api/v2/messages?limit={number_of_messages}"
        )
        return [self._mapper.map(item) for item in page.items]

    def get_last_message(self) -> Message:
        """
        获取最新的一封邮件

        Raises:
            NoSuchMessageError: 邮箱为空
        """
        messages = self.find_latest_messages(1)

        if not messages:
            self._logger.warning("No last message found, inbox is empty")
            raise NoSuchMessageError("No last message found. Inbox empty?")

        return messages[0]

    def get_number_of_messages(self) -> int:
        """获取服务器报告的邮件总数（total 字段）"""
        page = self._get_page(f"{self._base_uri}/api/v2/messages?limit=1")
        return page.total

    def get_message_by_id(self, message_id: str) -> Message:
        """
        按 ID 获取邮件

        空响应体、null 或 404 都表示邮件不存在。

        Args:
            message_id: 邮件 ID

        Returns:
            Message

        Raises:
            NoSuchMessageError: 邮件不存在
        """
        url = f"{self._base_uri}/api/v1/messages/{message_id}"

        try:
            body = self._send("GET", url)
        except TransportError as e:
            if e.status_code == 404:
                self._logger.warning(f"Message not found: {message_id}")
                raise NoSuchMessageError.for_message_id(message_id) from e
            raise

        message_data = json.loads(body) if body.strip() else None
        if message_data is None:
            self._logger.warning(f"Message not found: {message_id}")
            raise NoSuchMessageError.for_message_id(message_id)

        return self._mapper.map(message_data)

    # ============ 修改 ============

    def purge_messages(self) -> None:
        """删除所有邮件"""
        self._send("DELETE", f"{self._base_uri}/api/v1/messages")
        self._logger.info("Purged all messages")

    def release_message(
        self, message_id: str, host: str, port: int, email_address: str
    ) -> None:
        """
        通过 SMTP 服务器转发邮件

        Args:
            message_id: 邮件 ID
            host: SMTP 主机
            port: SMTP 端口（以字符串形式发送）
            email_address: 目标邮箱地址

        Raises:
            SerializationError: 请求载荷无法编码
        """
        try:
            body = json.dumps(
                {"Host": host, "Port": str(port), "Email": email_address},
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(message_id, str(e)) from e

        self._send(
            "POST",
            f"{self._base_uri}/api/v1/messages/{message_id}/release",
            headers={"Content-Type": "application/json"},
            body=body,
        )
        self._logger.info(
            f"Released message {message_id} to {email_address} via {host}:{port}"
        )

    # ============ 内部方法 ============

    def _send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> str:
        """发送请求并返回响应体，传输错误直接向上抛出"""
        request = self._request_factory.create_request(method, url, headers, body)
        self._logger.debug(f"{method} {url}")
        response = self._transport.send(request)
        return response.body

    def _get_page(self, url: str) -> PageResult:
        """请求列表接口并解码为 PageResult"""
        data = json.loads(self._send("GET", url))

        if not isinstance(data, dict):
            raise MappingError("", f"expected an object, got {type(data).__name__}")

        for key in ("count", "total"):
            if not isinstance(data.get(key), int) or isinstance(data.get(key), bool):
                raise MappingError(key, "expected an integer")

        items = data.get("items")
        if not isinstance(items, list):
            raise MappingError("items", "expected a list")

        return PageResult(count=data["count"], total=data["total"], items=items)

    @staticmethod
    def _require_positive(name: str, value: int) -> None:
        if value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value}")
