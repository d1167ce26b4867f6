"""カートエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..identifiers import BookId
from ..value_objects import CatalogItem

from .cart_item import CartItem


@dataclass
class Cart:
    """購入予定の書籍を一時的に保持するカート.

    同じ書籍IDのアイテムは1つまで。永続化はされない。
    """

    _items: list[CartItem] = field(default_factory=list)

    def add_item(self, item: CatalogItem) -> CartItem | None:
        """書籍をカートに追加する.

        既に同じIDの書籍がある場合は何もせずNoneを返す。
        """
        if self.contains(item.book_id):
            return None
        cart_item = CartItem.from_catalog_item(item)
        self._items.append(cart_item)
        return cart_item

    def clear(self) -> None:
        """全アイテムを削除する."""
        self._items.clear()

    def contains(self, book_id: BookId) -> bool:
        """指定IDの書籍がカートにあるか判定する."""
        return any(item.book_id == book_id for item in self._items)

    def get_item_count(self) -> int:
        """アイテム数を取得する."""
        return len(self._items)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._items) == 0

    def get_items(self) -> list[CartItem]:
        """アイテムのリストを取得（防御的コピー）."""
        return list(self._items)
