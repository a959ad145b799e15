"""默认 HTTP 请求构建器"""

from typing import Dict, Optional

from domain.mailhog.services.http_transport import HttpRequest


class DefaultRequestFactory:
    """构建不可变的 HttpRequest"""

    def create_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> HttpRequest:
        return HttpRequest(
            method=method.upper(),
            url=url,
            headers=dict(headers or {}),
            body=body,
        )
