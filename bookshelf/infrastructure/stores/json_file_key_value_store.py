"""キーバリューストアのJSONファイル実装."""
import json
import logging
import os
from pathlib import Path
from typing import Any

from bookshelf.domain.ports import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """全キーを1つのJSONファイルに保存するキーバリューストア.

    書き込みのたびにファイル全体を書き直す。ファイルが存在しない、
    または壊れている場合は空として扱う。
    """

    def __init__(self, path: str | Path | None = None) -> None:
        """初期化."""
        self._path = Path(
            path or os.environ.get("BOOKSHELF_STORE_PATH", "bookshelf-state.json")
        )

    @property
    def path(self) -> Path:
        """保存先ファイルのパス."""
        return self._path

    def get(self, key: str) -> Any | None:
        """キーに対応する値を取得する."""
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        """キーに値を保存する."""
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        """キーを削除する."""
        data = self._read_all()
        if key not in data:
            return
        del data[key]
        self._write_all(data)

    def _read_all(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read store file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Store file {self._path} does not contain an object")
            return {}
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
