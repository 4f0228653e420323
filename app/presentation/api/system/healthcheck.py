from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Request, Response, status

from app.core.config import get_settings
from app.core.logging import get_logger
from app.infrastructure.repositories.item_repository import ItemRepository
from app.presentation.schemas.system import HealthCheckResponse, StoreStatus

router = APIRouter()
logger = get_logger(__name__)


@router.get("/", response_model=HealthCheckResponse)
async def healthcheck(request: Request, response: Response) -> HealthCheckResponse:
    """
    ヘルスチェックエンドポイント

    - アイテムストアの状況（登録件数）
    - アプリケーションuptime
    - 環境情報を返す

    ストアが未初期化の場合は503 Service Unavailableを返す
    """
    settings = get_settings()

    # uptime計算
    start_time = getattr(request.app.state, "start_time", None)
    uptime_seconds = 0.0
    if start_time:
        uptime_seconds = (datetime.now(timezone.utc) - start_time).total_seconds()

    repository: Optional[ItemRepository] = getattr(
        request.app.state, "item_repository", None
    )
    if repository is None:
        logger.error("Health check failed: item store is not initialized")
        store_status = StoreStatus(status="unavailable", item_count=0)
        overall_status = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        store_status = StoreStatus(status="healthy", item_count=repository.count())
        overall_status = "ok"

    return HealthCheckResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc),
        uptime_seconds=uptime_seconds,
        store=store_status,
        environment=settings.normalized_env_mode,
    )
