"""キーバリューストアインターフェース."""
from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """永続キーバリューストアのインターフェース.

    値はJSONとして表現できるもの。読み込みに失敗した場合（ストレージが使えない、
    JSONが壊れている等）はNoneを返し、例外を送出しない。
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """キーに対応する値を取得する（存在しない場合はNone）."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """キーに値を保存する."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """キーを削除する."""
        pass
