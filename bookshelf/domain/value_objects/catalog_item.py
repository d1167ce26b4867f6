"""カタログ上の書籍を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..identifiers import BookId


@dataclass(frozen=True)
class CatalogItem:
    """外部から与えられる読み取り専用のカタログ書籍."""

    book_id: BookId
    title: str
    author: str
    genre: str

    @classmethod
    def of(cls, book_id: int, title: str, author: str, genre: str) -> CatalogItem:
        """プリミティブ値から生成する."""
        return cls(book_id=BookId(book_id), title=title, author=author, genre=genre)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogItem:
        """カタログフィードの辞書（id, title, author, genre）から生成する."""
        return cls.of(
            book_id=data["id"],
            title=data["title"],
            author=data["author"],
            genre=data["genre"],
        )

    def to_dict(self) -> dict[str, Any]:
        """カタログフィードと同じ形の辞書に変換する."""
        return {
            "id": self.book_id.value,
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
        }
