from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from ...core.config import get_settings
from ...infrastructure.repositories.item_repository import ItemRepository


def get_item_repository(request: Request) -> ItemRepository:
    """
    アイテムリポジトリを取得するdependency

    リポジトリはlifespanでアプリケーションごとに生成され、app.stateに保持される
    """
    return request.app.state.item_repository


# API認証用のヘッダーハンドラーを作成
api_key_header = APIKeyHeader(
    name="Authorization", scheme_name="Bearer", auto_error=False
)


def get_api_key(
    api_key_header: str = Security(api_key_header),
) -> str:
    """
    APIキー認証のdependency
    Authorizationヘッダーに'Bearer {api_key}'形式で指定されたAPIキーを検証

    - Authorization: Bearer your-api-key-here
    """
    settings = get_settings()

    if not api_key_header:
        raise HTTPException(
            status_code=HTTP_403_FORBIDDEN, detail="Authorization header missing"
        )

    # Bearerプレフィックスの処理
    scheme, _, api_key = api_key_header.partition(" ")
    if scheme.lower() != "bearer":
        raise HTTPException(
            status_code=HTTP_403_FORBIDDEN,
            detail="Authorization header must start with 'Bearer'",
        )

    if not api_key or api_key != settings.API_KEY:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Invalid API key")

    return api_key
