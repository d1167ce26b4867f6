"""キーバリューストアのDynamoDB実装."""
import json
import logging
import os
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from bookshelf.domain.ports import KeyValueStore

logger = logging.getLogger(__name__)


class DynamoDBKeyValueStore(KeyValueStore):
    """キーバリューストアのDynamoDB実装.

    1キーにつき1アイテム。パーティションキーは "key"、値はJSON文字列として
    "value" 属性に保存する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "BOOKSHELF_TABLE_NAME", "bookshelf-state"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def get(self, key: str) -> Any | None:
        """キーに対応する値を取得する."""
        try:
            response = self._table.get_item(Key={"key": key})
        except (BotoCoreError, ClientError) as e:
            logger.warning(f"Failed to get {key} from {self._table_name}: {e}")
            return None
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def set(self, key: str, value: Any) -> None:
        """キーに値を保存する."""
        self._table.put_item(Item=self._to_dynamodb_item(key, value))

    def remove(self, key: str) -> None:
        """キーを削除する."""
        self._table.delete_item(Key={"key": key})

    @staticmethod
    def _to_dynamodb_item(key: str, value: Any) -> dict[str, str]:
        """値をDynamoDBアイテムに変換する."""
        return {"key": key, "value": json.dumps(value, ensure_ascii=False)}

    @staticmethod
    def _from_dynamodb_item(item: dict[str, Any]) -> Any | None:
        """DynamoDBアイテムから値を復元する."""
        try:
            return json.loads(item["value"])
        except (KeyError, TypeError, json.JSONDecodeError) as e:
            logger.warning(f"Malformed item for key {item.get('key')}: {e}")
            return None
