"""アイテムエンティティ"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Item:
    """
    商品アイテム

    idはリポジトリへの登録時に採番される。登録前はNone。
    price/quantityの範囲チェックは行わない（負の値も保持できる）。

    Attributes:
        name: 商品名（重複可）
        price: 単価
        quantity: 在庫数
        id: リポジトリが採番したID
    """

    name: str
    price: int
    quantity: int
    id: Optional[int] = None
