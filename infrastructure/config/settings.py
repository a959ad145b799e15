"""
MailHog 客户端配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    MailHog 客户端配置类

    自动从环境变量和 .env 文件读取配置（前缀 MAILHOG_）
    """

    # ========== 服务地址 ==========
    base_url: str = "http://localhost:8025"

    # ========== HTTP 配置 ==========
    timeout: float = Field(default=10.0, gt=0)  # 请求超时时间（秒）

    # ========== 分页配置 ==========
    page_size: int = Field(default=50, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="MAILHOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
