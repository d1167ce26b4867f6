"""アカウントエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import Email


@dataclass(frozen=True)
class Account:
    """登録済みアカウント.

    登録後は変更も削除もされない。パスワードは平文のまま保持する。
    """

    email: Email
    password: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.password:
            raise ValueError("Password cannot be empty")

    def matches(self, email: Email, password: str) -> bool:
        """メールアドレスとパスワードが完全一致するか判定する."""
        return self.email == email and self.password == password
