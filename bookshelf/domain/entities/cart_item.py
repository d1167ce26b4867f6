"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import BookId
from ..value_objects import CatalogItem


@dataclass(frozen=True)
class CartItem:
    """カート内の書籍.

    表示に必要なタイトル・著者・ジャンルは追加時点の値を保持する。
    """

    book_id: BookId
    title: str
    author: str
    genre: str

    @classmethod
    def from_catalog_item(cls, item: CatalogItem) -> CartItem:
        """カタログ書籍から生成する."""
        return cls(
            book_id=item.book_id,
            title=item.title,
            author=item.author,
            genre=item.genre,
        )
