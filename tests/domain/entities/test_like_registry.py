"""LikeRegistryのテスト."""
import pytest

from bookshelf.domain.entities import LikeRegistry
from bookshelf.domain.identifiers import BookId
from bookshelf.domain.value_objects import Email

ALICE = Email("a@x.com")
BOB = Email("b@x.com")


class TestLikeRegistry:
    """LikeRegistryの単体テスト."""

    def test_エントリがなければ0件(self) -> None:
        registry = LikeRegistry()
        assert registry.count(BookId(1)) == 0
        assert registry.has_liked(BookId(1), ALICE) is False

    def test_toggleでいいねする(self) -> None:
        registry = LikeRegistry()
        assert registry.toggle(BookId(1), ALICE) is True
        assert registry.has_liked(BookId(1), ALICE) is True
        assert registry.count(BookId(1)) == 1

    def test_toggleを2回で元に戻る(self) -> None:
        registry = LikeRegistry()
        registry.toggle(BookId(1), BOB)
        registry.toggle(BookId(1), ALICE)
        assert registry.toggle(BookId(1), ALICE) is False
        assert registry.to_dict() == {"1": ["b@x.com"]}
        assert registry.count(BookId(1)) == 1

    def test_書籍ごとに独立している(self) -> None:
        registry = LikeRegistry()
        registry.toggle(BookId(1), ALICE)
        assert registry.has_liked(BookId(2), ALICE) is False

    def test_いいね解除後も空のエントリが残る(self) -> None:
        registry = LikeRegistry()
        registry.toggle(BookId(1), ALICE)
        registry.toggle(BookId(1), ALICE)
        assert registry.to_dict() == {"1": []}

    def test_辞書に変換できる(self) -> None:
        registry = LikeRegistry()
        registry.toggle(BookId(3), ALICE)
        registry.toggle(BookId(3), BOB)
        assert registry.to_dict() == {"3": ["a@x.com", "b@x.com"]}

    def test_辞書から復元できる(self) -> None:
        registry = LikeRegistry.from_dict({"3": ["a@x.com"], "5": []})
        assert registry.has_liked(BookId(3), ALICE) is True
        assert registry.count(BookId(5)) == 0

    def test_復元時に重複したメールアドレスをまとめる(self) -> None:
        registry = LikeRegistry.from_dict({"3": ["a@x.com", "a@x.com"]})
        assert registry.count(BookId(3)) == 1

    def test_不正なキーの復元はエラー(self) -> None:
        with pytest.raises(ValueError):
            LikeRegistry.from_dict({"abc": ["a@x.com"]})
