"""依赖注入容器"""

from .mailhog import MailhogContainer, create_mailhog_client

__all__ = ["MailhogContainer", "create_mailhog_client"]
