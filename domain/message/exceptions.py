"""邮件消息领域异常"""

from typing import Optional

from domain.common.exceptions import DomainException


class NoSuchMessageError(DomainException):
    """请求的邮件不存在"""

    def __init__(self, message: str, message_id: Optional[str] = None):
        self.message_id = message_id
        super().__init__(message)

    @classmethod
    def for_message_id(cls, message_id: str) -> "NoSuchMessageError":
        """创建指定 ID 不存在的异常"""
        return cls(f"No message found with ID {message_id}", message_id=message_id)


class MappingError(DomainException):
    """原始邮件记录不符合 API 结构"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Unable to map field '{field}': {reason}")


class SerializationError(DomainException):
    """释放邮件的请求载荷无法编码"""

    def __init__(self, message_id: str, reason: str = ""):
        self.message_id = message_id
        message = f"Unable to JSON encode data to release message {message_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
