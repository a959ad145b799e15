"""领域异常基类"""

from typing import Optional


class DomainException(Exception):
    """领域异常基类"""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)
