"""
アイテム管理のHTMLページ

- 一覧/詳細の表示
- 登録フォーム（POST後は詳細ページへリダイレクト、PRGパターン）
- 編集フォーム（POST後は詳細ページへリダイレクト）
"""

from typing import Any

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from app.core.logging import get_logger
from app.domain.models.item import Item
from app.infrastructure.repositories.item_repository import ItemRepository
from app.presentation.api import deps
from app.utils import get_templates

router = APIRouter(prefix="/basic/items", tags=["basic"])
logger = get_logger(__name__)


def render(request: Request, name: str, context: dict[str, Any]) -> Response:
    """テンプレートを描画する。lifespan実行前（テンプレート未設定）は503"""
    templates = get_templates(request)
    if templates is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Templates are not initialized",
        )
    return templates.TemplateResponse(request, name, context)


@router.get("", response_class=HTMLResponse)
async def items(
    request: Request,
    repository: ItemRepository = Depends(deps.get_item_repository),
) -> Response:
    """アイテム一覧ページ"""
    return render(request, "basic/items.html", {"items": repository.find_all()})


@router.get("/add", response_class=HTMLResponse)
async def add_form(request: Request) -> Response:
    """アイテム登録フォーム"""
    return render(request, "basic/addForm.html", {})


@router.post("/add")
async def add_item(
    item_name: str = Form(""),
    price: int = Form(...),
    quantity: int = Form(...),
    repository: ItemRepository = Depends(deps.get_item_repository),
) -> RedirectResponse:
    """
    アイテム登録

    商品名は空文字も受け付ける（JSON APIと同じく制約なし）
    登録後は詳細ページへ303でリダイレクトし、
    ブラウザの再読み込みによる二重登録を防ぐ
    """
    item = repository.insert(Item(name=item_name, price=price, quantity=quantity))
    return RedirectResponse(
        url=f"/basic/items/{item.id}?status=true",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/{item_id}", response_class=HTMLResponse)
async def item(
    request: Request,
    item_id: int,
    saved: bool = Query(False, alias="status"),
    repository: ItemRepository = Depends(deps.get_item_repository),
) -> Response:
    """アイテム詳細ページ（status=trueで保存完了メッセージを表示）"""
    return render(
        request,
        "basic/item.html",
        {"item": repository.find_by_id(item_id), "saved": saved},
    )


@router.get("/{item_id}/edit", response_class=HTMLResponse)
async def edit_form(
    request: Request,
    item_id: int,
    repository: ItemRepository = Depends(deps.get_item_repository),
) -> Response:
    """アイテム編集フォーム"""
    return render(
        request, "basic/editForm.html", {"item": repository.find_by_id(item_id)}
    )


@router.post("/{item_id}/edit")
async def edit_item(
    item_id: int,
    item_name: str = Form(""),
    price: int = Form(...),
    quantity: int = Form(...),
    repository: ItemRepository = Depends(deps.get_item_repository),
) -> RedirectResponse:
    """アイテム更新（パスのitem_idを正とする）"""
    repository.update(item_id, Item(name=item_name, price=price, quantity=quantity))
    return RedirectResponse(
        url=f"/basic/items/{item_id}", status_code=status.HTTP_303_SEE_OTHER
    )
