"""邮件消息值对象模块"""

from domain.message.value_objects.attachment import Attachment
from domain.message.value_objects.contact import Contact, ContactCollection
from domain.message.value_objects.message import Message

__all__ = ["Attachment", "Contact", "ContactCollection", "Message"]
