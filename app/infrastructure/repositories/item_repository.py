"""
アイテムリポジトリ

プロセス内メモリにアイテムを保持する
- 1から始まる連番IDの採番（再利用・リセットなし）
- 登録順での一覧取得
- ID指定の取得/更新（存在しない場合はItemNotFoundError）
"""

import threading
from dataclasses import replace
from typing import Optional

from ...core.logging import get_logger
from ...domain.exceptions.base import ItemNotFoundError
from ...domain.models.item import Item

logger = get_logger(__name__)


class ItemRepository:
    """
    インメモリのアイテムリポジトリ

    保持しているアイテムは正本であり、呼び出し側にはコピーを返す。
    返却されたアイテムを書き換えてもリポジトリには反映されないため、
    変更はupdate()経由で行うこと。

    採番と保持データの操作はすべてインスタンスごとのロックで直列化する。
    """

    def __init__(self) -> None:
        self._items: dict[int, Item] = {}
        self._sequence = 0
        self._lock = threading.Lock()

    def insert(self, item: Item) -> Item:
        """
        アイテムを登録

        Args:
            item: 登録するアイテム（idは無視される）

        Returns:
            採番済みのアイテム
        """
        with self._lock:
            self._sequence += 1
            stored = replace(item, id=self._sequence)
            self._items[self._sequence] = stored

        logger.info(f"Item inserted: id={stored.id}, name={stored.name}")
        return replace(stored)

    def find_all(self) -> list[Item]:
        """
        全アイテムを登録順で取得

        Returns:
            アイテムのリスト（空の場合は空リスト）
        """
        with self._lock:
            return [replace(item) for item in self._items.values()]

    def find_by_id(self, item_id: int) -> Item:
        """
        IDでアイテムを取得

        Args:
            item_id: アイテムID

        Returns:
            アイテム

        Raises:
            ItemNotFoundError: 該当IDのアイテムが存在しない場合
        """
        with self._lock:
            item = self._get(item_id)
            return replace(item)

    def update(self, item_id: int, values: Item) -> Item:
        """
        アイテムの名前・価格・数量を更新

        IDは変更しない。valuesにidが設定されていても無視する。

        Args:
            item_id: 更新対象のアイテムID
            values: 新しい値

        Returns:
            更新後のアイテム

        Raises:
            ItemNotFoundError: 該当IDのアイテムが存在しない場合
        """
        with self._lock:
            item = self._get(item_id)
            item.name = values.name
            item.price = values.price
            item.quantity = values.quantity
            updated = replace(item)

        logger.info(f"Item updated: id={item_id}")
        return updated

    def count(self) -> int:
        """登録済みアイテム数"""
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        """
        全アイテムを削除

        採番カウンタはリセットしない（IDは再利用されない）
        """
        with self._lock:
            self._items.clear()
        logger.info("Item store cleared")

    def _get(self, item_id: int) -> Item:
        # ロック取得済みの状態で呼ぶこと
        item: Optional[Item] = self._items.get(item_id)
        if item is None:
            logger.debug(f"Item not found: {item_id}")
            raise ItemNotFoundError(item_id)
        return item
