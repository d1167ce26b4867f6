"""キーバリューストア実装モジュール."""
# DynamoDBKeyValueStore は boto3 に依存するため、必要な時に
# bookshelf.infrastructure.stores.dynamodb_key_value_store から直接インポートする
from .in_memory_key_value_store import InMemoryKeyValueStore
from .json_file_key_value_store import JsonFileKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
