"""邮件附件值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class Attachment(BaseValueObject):
    """
    邮件附件值对象

    Attributes:
        filename: 附件文件名
        mime_type: MIME 类型（如 application/pdf）
        content: 解码后的附件内容
    """

    filename: str
    mime_type: str
    content: bytes

    @property
    def size(self) -> int:
        """附件大小（字节）"""
        return len(self.content)
