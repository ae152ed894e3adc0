"""
Ozon Seller 客户端配置管理
遵循约束：环境变量前缀 OZON__

凭证可以直接传给 new_client()；这里的配置只被 OzonClient.from_settings() 使用。
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api-seller.ozon.ru"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """客户端配置"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="OZON__",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    client_id: str = Field(default="")
    api_key: str = Field(default="")

    # HTTP
    base_url: str = Field(default=DEFAULT_API_BASE_URL)
    timeout: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text
    log_body_max_len: int = Field(default=5000, ge=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        """确保 base_url 是 http(s) 地址，去掉末尾斜杠"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.api_key)


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()
