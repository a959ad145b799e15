"""MailHog 测试共享 fixture"""

from typing import Any, Callable, Dict

import pytest

from raw_messages import create_raw_message


@pytest.fixture
def raw_message() -> Callable[..., Dict[str, Any]]:
    """原始邮件记录工厂"""
    return create_raw_message
