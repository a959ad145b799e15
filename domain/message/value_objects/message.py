"""捕获邮件值对象"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Tuple

from domain.common.base_value_object import BaseValueObject
from domain.message.value_objects.attachment import Attachment
from domain.message.value_objects.contact import Contact, ContactCollection


@dataclass(frozen=True)
class Message(BaseValueObject):
    """
    捕获邮件值对象

    表示 MailHog 捕获的一封测试邮件。只能由 MessageMapper 从 API 返回的
    原始 JSON 记录创建，创建后不可修改。

    Attributes:
        message_id: MailHog 分配的邮件唯一标识
        sender: 发件人
        recipients: 收件人（To）
        subject: 邮件主题（已解码）
        body: 解码后的正文
        created_at: MailHog 接收邮件的时间
        cc_recipients: 抄送人（Cc）
        bcc_recipients: 密送人（Bcc）
        attachments: 附件列表
        headers: 原始邮件头，(名称, 值列表) 元组
    """

    message_id: str
    sender: Contact
    recipients: ContactCollection
    subject: str
    body: str
    created_at: datetime
    cc_recipients: ContactCollection = ContactCollection()
    bcc_recipients: ContactCollection = ContactCollection()
    attachments: Tuple[Attachment, ...] = ()
    headers: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    @property
    def has_attachments(self) -> bool:
        """检查邮件是否包含附件"""
        return len(self.attachments) > 0

    @property
    def header_dict(self) -> Dict[str, Tuple[str, ...]]:
        """以字典形式返回邮件头"""
        return dict(self.headers)

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        获取邮件头的第一个值

        头名称不区分大小写。

        Args:
            name: 头名称，如 "Content-Type"
            default: 不存在时的返回值

        Returns:
            第一个头值，或 default
        """
        wanted = name.lower()
        for header_name, values in self.headers:
            if header_name.lower() == wanted and values:
                return values[0]
        return default
