"""MailHog API 原始邮件记录构建工具"""

from typing import Any, Dict, List, Optional


def create_raw_message(
    message_id: str = "abc123@mailhog.example",
    from_header: Optional[str] = "sender@example.com",
    to_header: Optional[str] = "recipient@example.com",
    subject: Optional[str] = "Test Subject",
    body: str = "Test body content",
    created: str = "2017-08-28T13:26:31.142637735+02:00",
    extra_headers: Optional[Dict[str, List[str]]] = None,
    mime: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """创建 MailHog API 格式的原始邮件记录"""
    headers: Dict[str, List[str]] = {
        "Content-Type": ["text/plain; charset=utf-8"],
        "Message-ID": [message_id],
    }
    if from_header is not None:
        headers["From"] = [from_header]
    if to_header is not None:
        headers["To"] = [to_header]
    if subject is not None:
        headers["Subject"] = [subject]
    headers.update(extra_headers or {})

    return {
        "ID": message_id,
        "From": {"Relays": None, "Mailbox": "envelope", "Domain": "example.com", "Params": ""},
        "To": [{"Relays": None, "Mailbox": "rcpt", "Domain": "example.com", "Params": ""}],
        "Content": {
            "Headers": headers,
            "Body": body,
            "Size": len(body),
            "MIME": None,
        },
        "Created": created,
        "MIME": mime,
        "Raw": {
            "From": "envelope@example.com",
            "To": ["rcpt@example.com"],
            "Data": "",
            "Helo": "localhost",
        },
    }

