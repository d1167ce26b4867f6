"""依存性の組み立てのテスト."""
from unittest.mock import patch

import pytest

from bookshelf.application import AppState
from bookshelf.dependencies import create_app_state, create_key_value_store
from bookshelf.infrastructure import InMemoryKeyValueStore, JsonFileKeyValueStore


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    """ストア設定の環境変数を消す."""
    for name in ("BOOKSHELF_STORE", "BOOKSHELF_STORE_PATH", "BOOKSHELF_TABLE_NAME"):
        monkeypatch.delenv(name, raising=False)


class TestCreateKeyValueStore:
    """create_key_value_storeのテスト."""

    def test_未設定ならインメモリ(self):
        assert isinstance(create_key_value_store(), InMemoryKeyValueStore)

    def test_fileならJSONファイル(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_STORE", "file")
        monkeypatch.setenv("BOOKSHELF_STORE_PATH", str(tmp_path / "state.json"))
        store = create_key_value_store()
        assert isinstance(store, JsonFileKeyValueStore)
        assert store.path == tmp_path / "state.json"

    def test_テーブル名があればDynamoDB(self, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_TABLE_NAME", "bookshelf-test")
        with patch(
            "bookshelf.infrastructure.stores.dynamodb_key_value_store.boto3"
        ) as mock_boto3:
            store = create_key_value_store()
        assert type(store).__name__ == "DynamoDBKeyValueStore"
        mock_boto3.resource.return_value.Table.assert_called_once_with("bookshelf-test")

    def test_未知の値はエラー(self, monkeypatch):
        monkeypatch.setenv("BOOKSHELF_STORE", "redis")
        with pytest.raises(ValueError, match="redis"):
            create_key_value_store()


class TestCreateAppState:
    """create_app_stateのテスト."""

    def test_指定したストアを使う(self):
        store = InMemoryKeyValueStore()
        state = create_app_state(store)
        state.register("a@x.com", "p1")
        assert store.get("accounts") == [{"email": "a@x.com", "password": "p1"}]

    def test_呼び出すたびに新しいハンドルを返す(self):
        first = create_app_state()
        second = create_app_state()
        assert isinstance(first, AppState)
        assert first is not second
