"""インフラストラクチャ層モジュール."""
from .stores import InMemoryKeyValueStore, JsonFileKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
