"""メールアドレスを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    """メールアドレスの値オブジェクト.

    アカウントの一意キー。大文字小文字を区別した完全一致で比較する。
    形式チェックは行わず、空でないことのみ検証する。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str):
            raise ValueError(f"Email must be a string: {self.value!r}")
        if not self.value:
            raise ValueError("Email cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
