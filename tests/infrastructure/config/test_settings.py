"""Settings 配置测试"""

import pytest
from pydantic import ValidationError

from infrastructure.config.settings import Settings


class TestSettingsDefaults:
    """默认值测试"""

    def test_defaults(self, monkeypatch):
        """测试默认配置"""
        for name in ("MAILHOG_BASE_URL", "MAILHOG_TIMEOUT", "MAILHOG_PAGE_SIZE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.base_url == "http://localhost:8025"
        assert settings.timeout == 10.0
        assert settings.page_size == 50


class TestSettingsFromEnvironment:
    """环境变量测试"""

    def test_reads_prefixed_environment_variables(self, monkeypatch):
        """测试读取 MAILHOG_ 前缀的环境变量"""
        monkeypatch.setenv("MAILHOG_BASE_URL", "http://mailhog:8025/")
        monkeypatch.setenv("MAILHOG_TIMEOUT", "2.5")
        monkeypatch.setenv("MAILHOG_PAGE_SIZE", "10")

        settings = Settings(_env_file=None)

        assert settings.base_url == "http://mailhog:8025/"
        assert settings.timeout == 2.5
        assert settings.page_size == 10

    def test_invalid_page_size_is_rejected(self, monkeypatch):
        """测试非正数 page_size 校验失败"""
        monkeypatch.setenv("MAILHOG_PAGE_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
