"""カタログ検索ドメインサービス."""
from collections.abc import Iterable

from ..identifiers import BookId
from ..value_objects import CatalogItem


class CatalogFilter:
    """読み取り専用のカタログをタイトル・ジャンルで絞り込む."""

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        """初期化."""
        self._items: tuple[CatalogItem, ...] = tuple(items)

    def search(self, query: str = "", genre: str = "") -> list[CatalogItem]:
        """書籍を検索する.

        Args:
            query: タイトルの部分一致（大文字小文字を区別しない）
            genre: ジャンルの完全一致（空文字なら全ジャンル）

        Returns:
            条件に一致する書籍（カタログ順）
        """
        needle = query.lower()
        return [
            item
            for item in self._items
            if needle in item.title.lower() and (not genre or item.genre == genre)
        ]

    def genres(self) -> list[str]:
        """ジャンルの一覧を出現順で取得する."""
        seen: list[str] = []
        for item in self._items:
            if item.genre not in seen:
                seen.append(item.genre)
        return seen

    def find(self, book_id: BookId) -> CatalogItem | None:
        """書籍IDで検索する."""
        for item in self._items:
            if item.book_id == book_id:
                return item
        return None
