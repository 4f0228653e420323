"""アイテムAPIのスキーマ定義"""

from pydantic import BaseModel, ConfigDict

from app.domain.models.item import Item


class ItemBase(BaseModel):
    """
    Itemの基本スキーマ

    price/quantityは整数であることのみ検証する
    """

    name: str
    price: int
    quantity: int

    def to_domain(self) -> Item:
        """IDなしのドメインエンティティに変換"""
        return Item(name=self.name, price=self.price, quantity=self.quantity)


class ItemCreate(ItemBase):
    """
    Item作成時のスキーマ
    """

    pass


class ItemUpdate(ItemBase):
    """
    Item更新時のスキーマ

    全フィールドを置き換える。ペイロードにidが含まれていても無視する
    （パスパラメータのIDを正とする）
    """

    pass


class ItemResponse(ItemBase):
    """
    Item取得時のスキーマ
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
