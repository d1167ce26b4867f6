"""Cartのテスト."""
from bookshelf.domain.entities import Cart, CartItem
from bookshelf.domain.identifiers import BookId
from bookshelf.domain.value_objects import CatalogItem

HOBBIT = CatalogItem.of(3, "The Hobbit", "J.R.R. Tolkien", "Fantasy")
SAPIENS = CatalogItem.of(4, "Sapiens", "Yuval Noah Harari", "Non-fiction")


class TestCart:
    """Cartの単体テスト."""

    def test_生成直後は空(self) -> None:
        cart = Cart()
        assert cart.is_empty() is True
        assert cart.get_item_count() == 0

    def test_add_itemで表示用の情報を保持する(self) -> None:
        """追加時点のタイトル・著者・ジャンルを保持することを確認."""
        cart = Cart()
        item = cart.add_item(HOBBIT)
        assert item is not None
        assert item.book_id == BookId(3)
        assert item.title == "The Hobbit"
        assert item.author == "J.R.R. Tolkien"
        assert item.genre == "Fantasy"

    def test_同じ書籍の追加は無視される(self) -> None:
        cart = Cart()
        cart.add_item(HOBBIT)
        assert cart.add_item(HOBBIT) is None
        assert cart.get_item_count() == 1

    def test_追加順を保持する(self) -> None:
        cart = Cart()
        cart.add_item(SAPIENS)
        cart.add_item(HOBBIT)
        assert [i.book_id.value for i in cart.get_items()] == [4, 3]

    def test_containsで書籍の有無を判定(self) -> None:
        cart = Cart()
        cart.add_item(HOBBIT)
        assert cart.contains(BookId(3)) is True
        assert cart.contains(BookId(4)) is False

    def test_clearで全アイテムを削除(self) -> None:
        cart = Cart()
        cart.add_item(HOBBIT)
        cart.add_item(SAPIENS)
        cart.clear()
        assert cart.is_empty() is True

    def test_get_itemsは防御的コピーを返す(self) -> None:
        cart = Cart()
        cart.add_item(HOBBIT)
        cart.get_items().clear()
        assert cart.get_item_count() == 1

    def test_同じ書籍から作ったアイテムは等価(self) -> None:
        """同じカタログ書籍から作ったCartItemが等価になることを確認."""
        assert CartItem.from_catalog_item(HOBBIT) == CartItem.from_catalog_item(HOBBIT)
