"""依存性の組み立て.

BOOKSHELF_STORE 環境変数でストア実装を選ぶ（memory / file / dynamodb）。
未設定でも BOOKSHELF_TABLE_NAME が設定されていればDynamoDB実装を使用する。
"""
import logging
import os

from bookshelf.application import AppState
from bookshelf.domain.ports import KeyValueStore
from bookshelf.infrastructure import InMemoryKeyValueStore, JsonFileKeyValueStore

logger = logging.getLogger(__name__)

STORE_MEMORY = "memory"
STORE_FILE = "file"
STORE_DYNAMODB = "dynamodb"


def _store_kind() -> str:
    """使用するストア実装を判定する."""
    kind = os.environ.get("BOOKSHELF_STORE")
    if kind:
        return kind.lower()
    # BOOKSHELF_TABLE_NAME が設定されていればDynamoDBを使用
    if os.environ.get("BOOKSHELF_TABLE_NAME") is not None:
        return STORE_DYNAMODB
    return STORE_MEMORY


def create_key_value_store() -> KeyValueStore:
    """環境変数に応じたキーバリューストアを生成する.

    Raises:
        ValueError: BOOKSHELF_STORE が未知の値の場合
    """
    kind = _store_kind()
    if kind == STORE_MEMORY:
        return InMemoryKeyValueStore()
    if kind == STORE_FILE:
        return JsonFileKeyValueStore()
    if kind == STORE_DYNAMODB:
        from bookshelf.infrastructure.stores.dynamodb_key_value_store import (
            DynamoDBKeyValueStore,
        )

        return DynamoDBKeyValueStore()
    raise ValueError(f"Unknown BOOKSHELF_STORE: {kind}")


def create_app_state(store: KeyValueStore | None = None) -> AppState:
    """アプリケーション状態を生成する.

    呼び出すたびに新しいハンドルを返す。

    Args:
        store: 使用するストア（省略時は環境変数から生成）
    """
    if store is None:
        store = create_key_value_store()
    logger.debug(f"Creating app state with {type(store).__name__}")
    return AppState(store)
