"""書籍識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookId:
    """カタログ上の書籍ID（外部参照用）."""

    value: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"BookId must be an integer: {self.value!r}")

    @classmethod
    def from_key(cls, key: str) -> BookId:
        """永続化キー（文字列）から生成する."""
        try:
            return cls(int(key))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid BookId key: {key!r}") from e

    def to_key(self) -> str:
        """永続化キー（文字列）に変換する."""
        return str(self.value)

    def __str__(self) -> str:
        """文字列表現."""
        return str(self.value)
