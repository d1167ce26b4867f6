"""いいね登録簿エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..identifiers import BookId
from ..value_objects import Email


@dataclass
class LikeRegistry:
    """書籍ごとに「いいね」したアカウントを保持する登録簿.

    1冊につき同じメールアドレスは最大1回。エントリは最初のいいねで作られ、
    いいね解除で空になっても削除はしない。
    """

    _likes: dict[BookId, list[Email]] = field(default_factory=dict)

    def toggle(self, book_id: BookId, email: Email) -> bool:
        """いいね状態を反転する.

        Returns:
            反転後にいいねしている場合True
        """
        emails = self._likes.setdefault(book_id, [])
        if email in emails:
            emails.remove(email)
            return False
        emails.append(email)
        return True

    def has_liked(self, book_id: BookId, email: Email) -> bool:
        """指定アカウントがいいねしているか判定する."""
        return email in self._likes.get(book_id, [])

    def count(self, book_id: BookId) -> int:
        """いいね数を取得する."""
        return len(self._likes.get(book_id, []))

    def to_dict(self) -> dict[str, list[str]]:
        """永続化用の辞書に変換する."""
        return {
            book_id.to_key(): [email.value for email in emails]
            for book_id, emails in self._likes.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, list[str]]) -> LikeRegistry:
        """永続化された辞書から復元する.

        重複したメールアドレスは1つにまとめる。
        """
        likes: dict[BookId, list[Email]] = {}
        for key, emails in data.items():
            unique: list[Email] = []
            for value in emails:
                email = Email(value)
                if email not in unique:
                    unique.append(email)
            likes[BookId.from_key(key)] = unique
        return cls(_likes=likes)
