"""联系人值对象"""

from dataclasses import dataclass
from email.utils import formataddr, getaddresses, parseaddr
from typing import Iterable, Iterator, Optional, Tuple

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class Contact(BaseValueObject):
    """
    联系人值对象

    表示邮件头中的一个地址，例如 "Alice <alice@example.com>"。

    Attributes:
        email_address: 邮箱地址
        name: 显示名称（可选）
    """

    email_address: str
    name: Optional[str] = None

    @classmethod
    def from_string(cls, value: str) -> "Contact":
        """
        从 RFC 5322 地址字符串创建联系人

        Args:
            value: 地址字符串，如 "Alice <alice@example.com>" 或 "alice@example.com"

        Returns:
            Contact 实例
        """
        name, address = parseaddr(value)
        if not address:
            address = value.strip()
        return cls(email_address=address, name=name or None)

    def __str__(self) -> str:
        if self.name:
            return formataddr((self.name, self.email_address))
        return self.email_address


@dataclass(frozen=True)
class ContactCollection(BaseValueObject):
    """
    联系人集合值对象

    保持邮件头中的地址顺序，不可修改。
    """

    contacts: Tuple[Contact, ...] = ()

    @classmethod
    def from_string(cls, value: str) -> "ContactCollection":
        """
        从逗号分隔的地址头创建联系人集合

        Args:
            value: 地址头值，如 "a@example.com, Bob <b@example.com>"

        Returns:
            ContactCollection 实例
        """
        return cls.from_strings([value])

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> "ContactCollection":
        """从多个地址头值创建联系人集合"""
        contacts = tuple(
            Contact(email_address=address, name=name or None)
            for name, address in getaddresses(list(values))
            if address
        )
        return cls(contacts=contacts)

    def contains(self, email_address: str) -> bool:
        """检查集合中是否包含指定邮箱地址（不区分大小写）"""
        wanted = email_address.lower()
        return any(c.email_address.lower() == wanted for c in self.contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts)

    def __len__(self) -> int:
        return len(self.contacts)

    def __getitem__(self, index: int) -> Contact:
        return self.contacts[index]
