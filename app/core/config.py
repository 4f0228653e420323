from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import get_logger

logger = get_logger(__name__)


class Settings(BaseSettings):
    """
    アプリケーション設定
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # 未定義のフィールドを無視
    )

    ENV_MODE: Literal["local", "development", "production", "test"] = "development"

    BACKEND_CORS_ORIGINS: str | list[str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> list[str] | str:
        if v is None or v == "":
            return []
        if v == "*":
            return ["*"]
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        if isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    SECURITY_HEADERS: bool = False
    CSP_POLICY: str = (
        "default-src 'self'; img-src 'self' data:; script-src 'self'; style-src 'self'"
    )

    API_KEY: str = "default_api_key_change_me_in_production"

    # 起動時にサンプルアイテム（itemA, itemB）を登録する
    SEED_SAMPLE_ITEMS: bool = True

    SENTRY_DSN: Optional[str] = None
    SENTRY_TRACES_SAMPLE_RATE: float = 1.0

    @field_validator("SENTRY_DSN")
    @classmethod
    def sentry_dsn_can_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        return v

    NEW_RELIC_LICENSE_KEY: Optional[str] = None
    NEW_RELIC_APP_NAME: str = "Item Registry"
    NEW_RELIC_HIGH_SECURITY: bool = False
    NEW_RELIC_MONITOR_MODE: bool = True

    @property
    def is_local(self) -> bool:
        """ローカル環境かどうか（developmentを含む）"""
        return self.ENV_MODE in ("local", "development")

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.ENV_MODE == "development"

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.ENV_MODE == "production"

    @property
    def is_test(self) -> bool:
        """テスト環境かどうか"""
        return self.ENV_MODE == "test"

    @property
    def normalized_env_mode(self) -> str:
        """監視ツール・ヘルスチェック向けの環境名（developmentはlocalに寄せる）"""
        if self.ENV_MODE == "development":
            return "local"
        return self.ENV_MODE


@lru_cache
def get_settings() -> Settings:
    """
    アプリケーション設定を取得（キャッシュ）
    """
    return Settings()
