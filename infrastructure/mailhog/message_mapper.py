"""MailHog 原始邮件记录映射器"""

import base64
import binascii
import quopri
import re
from datetime import datetime
from email.header import decode_header, make_header
from email.message import Message as MimeHeaders
from email.utils import getaddresses, parseaddr
from typing import Any, Dict, Iterator, List, Optional, Tuple

from domain.message.exceptions import MappingError
from domain.message.value_objects.attachment import Attachment
from domain.message.value_objects.contact import Contact, ContactCollection
from domain.message.value_objects.message import Message


_CREATED_PATTERN = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?$"
)


class MessageMapper:
    """
    MailHog 原始邮件记录映射器

    将 MailHog API 返回的单条 JSON 记录转换为 Message 值对象。
    纯函数，无 I/O，无状态：
    - 校验必需字段（ID、Content、Created、发件人）
    - 解码 RFC 2047 编码的邮件头
    - 按 Content-Transfer-Encoding 解码正文
    - 从 MIME 部分中提取正文和附件
    """

    def map(self, record: Any) -> Message:
        """
        映射一条原始邮件记录

        Args:
            record: API 返回的原始邮件记录

        Returns:
            Message 实例

        Raises:
            MappingError: 缺少必需字段或字段类型错误
        """
        if not isinstance(record, dict):
            raise MappingError("", f"expected an object, got {type(record).__name__}")

        message_id = self._require(record, "ID", str)
        content = self._require(record, "Content", dict)
        headers = self._headers(content.get("Headers"), "Content.Headers")
        raw_body = self._require(content, "Body", str, path="Content.Body")
        created_at = self._parse_created(self._require(record, "Created", str))

        sender = self._sender(record, headers)
        recipients = self._recipients(record, headers)

        body, attachments = self._body_and_attachments(record, headers, raw_body)

        return Message(
            message_id=message_id,
            sender=sender,
            recipients=recipients,
            subject=self._decode_header_value(self._first(headers, "Subject") or ""),
            body=body,
            created_at=created_at,
            cc_recipients=self._contacts(headers, "Cc"),
            bcc_recipients=self._contacts(headers, "Bcc"),
            attachments=tuple(attachments),
            headers=tuple((name, tuple(values)) for name, values in headers.items()),
        )

    # ============ 字段校验 ============

    def _require(
        self,
        data: Dict[str, Any],
        key: str,
        expected: type,
        path: Optional[str] = None,
    ) -> Any:
        """读取必需字段并校验类型"""
        path = path or key
        if key not in data or data[key] is None:
            raise MappingError(path, "field is missing")
        value = data[key]
        if not isinstance(value, expected):
            raise MappingError(
                path,
                f"expected {expected.__name__}, got {type(value).__name__}",
            )
        return value

    def _headers(self, value: Any, path: str) -> Dict[str, List[str]]:
        """校验邮件头结构：名称 -> 字符串列表"""
        if value is None:
            raise MappingError(path, "field is missing")
        if not isinstance(value, dict):
            raise MappingError(path, f"expected dict, got {type(value).__name__}")

        for name, values in value.items():
            if not isinstance(values, list) or not all(
                isinstance(v, str) for v in values
            ):
                raise MappingError(f"{path}.{name}", "expected a list of strings")

        return value

    # ============ 邮件头 ============

    def _first(self, headers: Dict[str, List[str]], name: str) -> Optional[str]:
        values = headers.get(name)
        if values:
            return values[0]
        return None

    def _decode_header_value(self, value: str) -> str:
        """解码 RFC 2047 编码的邮件头"""
        if not value:
            return ""
        try:
            return str(make_header(decode_header(value)))
        except (LookupError, UnicodeError):
            return value

    def _contacts(self, headers: Dict[str, List[str]], name: str) -> ContactCollection:
        """
        解析地址头

        先按原始值拆分地址，再解码每个显示名称，
        避免编码名称中的逗号被当作地址分隔符。
        """
        contacts = tuple(
            Contact(email_address=address, name=self._decode_header_value(display) or None)
            for display, address in getaddresses(headers.get(name, []))
            if address
        )
        return ContactCollection(contacts=contacts)

    def _sender(self, record: Dict[str, Any], headers: Dict[str, List[str]]) -> Contact:
        """发件人：优先 From 头，否则使用 SMTP 信封"""
        from_header = self._first(headers, "From")
        if from_header:
            display, address = parseaddr(from_header)
            return Contact(
                email_address=address or from_header.strip(),
                name=self._decode_header_value(display) or None,
            )

        envelope = record.get("From")
        if isinstance(envelope, dict):
            address = self._envelope_address(envelope)
            if address:
                return Contact(email_address=address)

        raise MappingError("Content.Headers.From", "sender is missing")

    def _recipients(
        self, record: Dict[str, Any], headers: Dict[str, List[str]]
    ) -> ContactCollection:
        """收件人：优先 To 头，否则使用 SMTP 信封"""
        if headers.get("To"):
            return self._contacts(headers, "To")

        envelope = record.get("To") or []
        if not isinstance(envelope, list):
            raise MappingError("To", f"expected list, got {type(envelope).__name__}")

        addresses = [
            address
            for address in (
                self._envelope_address(e) for e in envelope if isinstance(e, dict)
            )
            if address
        ]
        return ContactCollection(contacts=tuple(Contact(a) for a in addresses))

    def _envelope_address(self, envelope: Dict[str, Any]) -> str:
        mailbox = envelope.get("Mailbox") or ""
        domain = envelope.get("Domain") or ""
        if not mailbox:
            return ""
        return f"{mailbox}@{domain}" if domain else mailbox

    # ============ 时间 ============

    def _parse_created(self, value: str) -> datetime:
        """
        解析 Created 时间

        MailHog 使用纳秒精度（如 2017-08-28T13:26:31.142637735+02:00），
        datetime 只支持微秒，多余的位数被截断。
        """
        match = _CREATED_PATTERN.match(value.strip())
        if match is None:
            raise MappingError("Created", f"invalid timestamp '{value}'")

        iso = match.group("base")
        fraction = match.group("fraction")
        if fraction:
            iso += "." + fraction[:6].ljust(6, "0")

        offset = match.group("offset")
        if offset == "Z":
            iso += "+00:00"
        elif offset:
            iso += offset

        try:
            return datetime.fromisoformat(iso)
        except ValueError as e:
            raise MappingError("Created", str(e)) from e

    # ============ 正文与附件 ============

    def _body_and_attachments(
        self,
        record: Dict[str, Any],
        headers: Dict[str, List[str]],
        raw_body: str,
    ) -> Tuple[str, List[Attachment]]:
        """
        提取正文和附件

        非 multipart 邮件直接解码 Content.Body；
        multipart 邮件优先取第一个 text/plain 部分，其次 text/html。
        """
        mime = record.get("MIME")
        if not mime:
            return self._decode_text(headers, raw_body), []

        plain: Optional[str] = None
        html: Optional[str] = None
        attachments: List[Attachment] = []

        for part_headers, part_body in self._walk_parts(mime, "MIME"):
            mime_headers = self._mime_headers(part_headers)

            if mime_headers.get_content_disposition() == "attachment":
                attachments.append(
                    Attachment(
                        filename=mime_headers.get_filename() or "",
                        mime_type=mime_headers.get_content_type(),
                        content=self._decode_bytes(mime_headers, part_body),
                    )
                )
                continue

            content_type = mime_headers.get_content_type()
            if content_type == "text/plain" and plain is None:
                plain = self._decode_text(part_headers, part_body)
            elif content_type == "text/html" and html is None:
                html = self._decode_text(part_headers, part_body)

        if plain is not None:
            return plain, attachments
        if html is not None:
            return html, attachments
        return self._decode_text(headers, raw_body), attachments

    def _walk_parts(
        self, mime: Any, path: str
    ) -> Iterator[Tuple[Dict[str, List[str]], str]]:
        """深度优先遍历 MIME 叶子部分"""
        if not isinstance(mime, dict):
            raise MappingError(path, f"expected dict, got {type(mime).__name__}")

        parts = mime.get("Parts") or []
        if not isinstance(parts, list):
            raise MappingError(f"{path}.Parts", "expected a list")

        for index, part in enumerate(parts):
            part_path = f"{path}.Parts[{index}]"
            if not isinstance(part, dict):
                raise MappingError(part_path, "expected an object")

            if part.get("MIME"):
                yield from self._walk_parts(part["MIME"], f"{part_path}.MIME")
                continue

            part_headers = self._headers(part.get("Headers") or {}, f"{part_path}.Headers")
            part_body = part.get("Body") or ""
            if not isinstance(part_body, str):
                raise MappingError(f"{part_path}.Body", "expected str")
            yield part_headers, part_body

    def _mime_headers(self, headers: Dict[str, List[str]]) -> MimeHeaders:
        mime_headers = MimeHeaders()
        for name, values in headers.items():
            for value in values:
                mime_headers[name] = value
        return mime_headers

    def _decode_bytes(self, mime_headers: MimeHeaders, body: str) -> bytes:
        """按 Content-Transfer-Encoding 解码为字节"""
        encoding = (mime_headers.get("Content-Transfer-Encoding") or "").strip().lower()

        if encoding == "base64":
            try:
                return base64.b64decode("".join(body.split()))
            except (binascii.Error, ValueError) as e:
                raise MappingError("Body", f"invalid base64 content: {e}") from e

        if encoding == "quoted-printable":
            return quopri.decodestring(body.encode("utf-8"))

        return body.encode("utf-8")

    def _decode_text(self, headers: Dict[str, List[str]], body: str) -> str:
        """解码文本正文"""
        mime_headers = self._mime_headers(headers)
        encoding = (mime_headers.get("Content-Transfer-Encoding") or "").strip().lower()
        if encoding not in ("base64", "quoted-printable"):
            return body

        payload = self._decode_bytes(mime_headers, body)
        charset = mime_headers.get_content_charset() or "utf-8"
        try:
            return payload.decode(charset, errors="replace")
        except LookupError:
            return payload.decode("utf-8", errors="replace")
