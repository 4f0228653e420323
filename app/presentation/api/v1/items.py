from fastapi import APIRouter, Depends

from app.infrastructure.repositories.item_repository import ItemRepository
from app.presentation.api import deps
from app.presentation.schemas.item import ItemCreate, ItemResponse, ItemUpdate

router = APIRouter()


@router.get("/", response_model=list[ItemResponse])
def read_items(
    repository: ItemRepository = Depends(deps.get_item_repository),
) -> list[ItemResponse]:
    """
    アイテム一覧取得（登録順）
    """
    return [ItemResponse.model_validate(item) for item in repository.find_all()]


@router.post("/", response_model=ItemResponse)
def create_item(
    *,
    repository: ItemRepository = Depends(deps.get_item_repository),
    item_in: ItemCreate,
    _: str = Depends(deps.get_api_key),  # APIキー認証
) -> ItemResponse:
    """
    アイテム登録（APIキー認証必須）
    """
    item = repository.insert(item_in.to_domain())
    return ItemResponse.model_validate(item)


@router.get("/{item_id}", response_model=ItemResponse)
def read_item(
    *,
    repository: ItemRepository = Depends(deps.get_item_repository),
    item_id: int,
) -> ItemResponse:
    """
    アイテム取得

    存在しない場合はItemNotFoundErrorが例外ハンドラーで404に変換される
    """
    return ItemResponse.model_validate(repository.find_by_id(item_id))


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(
    *,
    repository: ItemRepository = Depends(deps.get_item_repository),
    item_id: int,
    item_in: ItemUpdate,
    _: str = Depends(deps.get_api_key),  # APIキー認証
) -> ItemResponse:
    """
    アイテム更新（APIキー認証必須）

    パスのitem_idを正とし、ペイロードのidは無視する
    """
    item = repository.update(item_id, item_in.to_domain())
    return ItemResponse.model_validate(item)
