"""アプリケーションライフサイクル管理"""

import contextlib
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from app.core.config import get_settings
from app.core.logging import get_logger
from app.domain.models.item import Item
from app.infrastructure.repositories.item_repository import ItemRepository

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

SAMPLE_ITEMS = (
    Item(name="itemA", price=10000, quantity=10),
    Item(name="itemB", price=20000, quantity=20),
)


def seed_sample_items(repository: ItemRepository) -> None:
    """サンプルアイテムを登録する"""
    for item in SAMPLE_ITEMS:
        repository.insert(item)
    logger.info(f"Seeded {len(SAMPLE_ITEMS)} sample items")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    アプリケーションのライフサイクル管理

    起動時:
    - 起動時刻の記録
    - アイテムリポジトリの生成（アプリケーションごとに1つ）
    - サンプルデータ登録（SEED_SAMPLE_ITEMS=Trueの場合）
    - テンプレートエンジン設定（app/templates/はパッケージに同梱）

    Args:
        app: FastAPIアプリケーションインスタンス

    Yields:
        None
    """
    settings = get_settings()

    # 起動時刻を記録（healthcheckのuptime計算用）
    app.state.start_time = datetime.now(timezone.utc)

    # アイテムリポジトリ
    repository = ItemRepository()
    if settings.SEED_SAMPLE_ITEMS:
        seed_sample_items(repository)
    else:
        logger.info("Sample items are disabled")
    app.state.item_repository = repository

    # Jinja2テンプレート
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    logger.info(f"Jinja2 templates enabled: {TEMPLATES_DIR}")

    yield

    logger.info(f"Shutting down with {repository.count()} items in store")
