"""キーバリューストアのインメモリ実装."""
import json
import logging
from typing import Any

from bookshelf.domain.ports import KeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """キーバリューストアのインメモリ実装.

    値はJSON文字列として保持するため、保存後に呼び出し元のオブジェクトを
    変更してもストアには影響しない。
    """

    def __init__(self, snapshot: dict[str, str] | None = None) -> None:
        """初期化.

        Args:
            snapshot: snapshot() で取得した内容（再読み込みの再現用）
        """
        self._data: dict[str, str] = dict(snapshot or {})

    def get(self, key: str) -> Any | None:
        """キーに対応する値を取得する."""
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Malformed JSON for key {key}: {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        """キーに値を保存する."""
        self._data[key] = json.dumps(value, ensure_ascii=False)

    def remove(self, key: str) -> None:
        """キーを削除する."""
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """保存内容のコピーを取得する."""
        return dict(self._data)
