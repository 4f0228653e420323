"""
pytest設定と共通フィクスチャ
"""

import os
from typing import Any, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


# get_settings()はキャッシュされるため、アプリのインポート前に環境変数を設定
os.environ["ENV_MODE"] = "test"
os.environ["API_KEY"] = "test-api-key"
os.environ["SEED_SAMPLE_ITEMS"] = "true"

from app.core.app_factory import create_app  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.domain.models.item import Item  # noqa: E402
from app.infrastructure.repositories.item_repository import ItemRepository  # noqa: E402


def pytest_configure(config: Any) -> None:
    """
    pytest実行前の設定

    .envなど他の経路で読み込まれた設定を破棄し、テスト用の環境変数で再構築する
    """
    get_settings.cache_clear()


@pytest.fixture
def repository() -> ItemRepository:
    """
    空のアイテムリポジトリ

    Returns:
        ItemRepository
    """
    return ItemRepository()


@pytest.fixture
def item_a() -> Item:
    """未登録のitemA"""
    return Item(name="itemA", price=10000, quantity=10)


@pytest.fixture
def item_b() -> Item:
    """未登録のitemB"""
    return Item(name="itemB", price=20000, quantity=20)


@pytest.fixture(scope="function")
def app() -> FastAPI:
    """
    テスト用FastAPIアプリケーション

    テストごとに生成するため、アイテムストアはテスト間で共有されない
    """
    return create_app()


@pytest.fixture(scope="function")
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    テスト用FastAPIクライアント

    lifespanが実行され、サンプルアイテム（id=1: itemA, id=2: itemB）が登録される

    Yields:
        FastAPI TestClient
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_key() -> str:
    """
    テスト用APIキー

    Returns:
        APIキー文字列
    """
    settings = get_settings()
    return settings.API_KEY


@pytest.fixture
def auth_headers(api_key: str) -> dict[str, str]:
    """APIキー認証ヘッダー"""
    return {"Authorization": f"Bearer {api_key}"}
