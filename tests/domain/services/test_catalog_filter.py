"""CatalogFilterのテスト."""
from bookshelf.domain.identifiers import BookId
from bookshelf.domain.services import CatalogFilter
from bookshelf.domain.value_objects import CatalogItem

BOOKS = [
    CatalogItem.of(1, "1984", "George Orwell", "Dystopian"),
    CatalogItem.of(2, "To Kill a Mockingbird", "Harper Lee", "Classic"),
    CatalogItem.of(3, "The Hobbit", "J.R.R. Tolkien", "Fantasy"),
    CatalogItem.of(4, "Sapiens", "Yuval Noah Harari", "Non-fiction"),
    CatalogItem.of(5, "The Great Gatsby", "F. Scott Fitzgerald", "Classic"),
    CatalogItem.of(6, "The Catcher in the Rye", "J.D. Salinger", "Classic"),
]


class TestCatalogFilter:
    """CatalogFilterの単体テスト."""

    def test_条件なしなら全件(self) -> None:
        assert CatalogFilter(BOOKS).search() == BOOKS

    def test_タイトルの部分一致で大文字小文字を区別しない(self) -> None:
        result = CatalogFilter(BOOKS).search(query="THE")
        assert [b.book_id.value for b in result] == [3, 5, 6]

    def test_ジャンルで絞り込む(self) -> None:
        result = CatalogFilter(BOOKS).search(genre="Classic")
        assert [b.book_id.value for b in result] == [2, 5, 6]

    def test_タイトルとジャンルの両方で絞り込む(self) -> None:
        result = CatalogFilter(BOOKS).search(query="great", genre="Classic")
        assert [b.title for b in result] == ["The Great Gatsby"]

    def test_ジャンル一覧は出現順で重複なし(self) -> None:
        assert CatalogFilter(BOOKS).genres() == [
            "Dystopian",
            "Classic",
            "Fantasy",
            "Non-fiction",
        ]

    def test_IDで検索する(self) -> None:
        catalog = CatalogFilter(BOOKS)
        found = catalog.find(BookId(4))
        assert found is not None
        assert found.title == "Sapiens"
        assert catalog.find(BookId(99)) is None
