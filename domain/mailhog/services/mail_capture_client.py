"""邮件捕获服务客户端接口"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from domain.message.value_objects.message import Message


class MailCaptureClient(ABC):
    """
    邮件捕获服务客户端接口

    定义查询、清空和转发测试邮件的契约。
    具体实现在基础设施层，负责：
    - 构建 HTTP 请求并通过注入的传输层发送
    - 解码 JSON 响应
    - 分页遍历邮箱
    - 将原始记录映射为 Message
    """

    @abstractmethod
    def find_all_messages(self, page_size: Optional[int] = None) -> Iterator[Message]:
        """
        按服务器顺序惰性遍历邮箱中的所有邮件

        Args:
            page_size: 每页请求的邮件数量（可选，由实现决定默认值）

        Returns:
            Message 迭代器
        """
        raise NotImplementedError

    @abstractmethod
    def find_latest_messages(self, number_of_messages: int) -> List[Message]:
        """
        获取最新的 N 封邮件

        Args:
            number_of_messages: 邮件数量

        Returns:
            Message 列表
        """
        raise NotImplementedError

    @abstractmethod
    def get_last_message(self) -> Message:
        """
        获取最新的一封邮件

        Raises:
            NoSuchMessageError: 邮箱为空
        """
        raise NotImplementedError

    @abstractmethod
    def get_number_of_messages(self) -> int:
        """获取服务器报告的邮件总数"""
        raise NotImplementedError

    @abstractmethod
    def purge_messages(self) -> None:
        """删除所有邮件"""
        raise NotImplementedError

    @abstractmethod
    def release_message(
        self, message_id: str, host: str, port: int, email_address: str
    ) -> None:
        """
        将邮件转发到真实的 SMTP 服务器

        Args:
            message_id: 邮件 ID
            host: SMTP 主机
            port: SMTP 端口
            email_address: 目标邮箱地址

        Raises:
            SerializationError: 请求载荷无法编码
        """
        raise NotImplementedError

    @abstractmethod
    def get_message_by_id(self, message_id: str) -> Message:
        """
        按 ID 获取邮件

        Raises:
            NoSuchMessageError: 邮件不存在
        """
        raise NotImplementedError
