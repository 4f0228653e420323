"""システム関連のスキーマ定義"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class StoreStatus(BaseModel):
    """
    アイテムストアの状況

    Attributes:
        status: ストアの状態（起動処理前はunavailable）
        item_count: 登録済みアイテム数
    """

    status: Literal["healthy", "unavailable"]
    item_count: int


class HealthCheckResponse(BaseModel):
    """
    ヘルスチェックレスポンス

    Attributes:
        status: 全体的なヘルス状態（ok/unhealthy）
        timestamp: レスポンス生成時刻
        uptime_seconds: アプリケーション起動からの経過秒数
        store: アイテムストアの状況
        environment: 実行環境（production/test/local等）
    """

    status: Literal["ok", "unhealthy"]
    timestamp: datetime
    uptime_seconds: float
    store: StoreStatus
    environment: str
