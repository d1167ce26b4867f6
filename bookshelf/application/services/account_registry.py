"""アカウント登録簿サービス."""
import logging

from bookshelf.domain.entities import Account
from bookshelf.domain.ports import KeyValueStore
from bookshelf.domain.value_objects import Email

logger = logging.getLogger(__name__)

ACCOUNTS_KEY = "accounts"


class DuplicateAccountError(Exception):
    """同じメールアドレスのアカウントが既に存在するエラー."""

    def __init__(self, email: Email) -> None:
        self.email = email
        super().__init__("User already exists!")


class AccountRegistry:
    """登録済みアカウントの集合を管理する.

    構築時に一度だけストアから読み込み、変更のたびに集合全体を書き直す。
    """

    def __init__(self, store: KeyValueStore) -> None:
        """初期化.

        Args:
            store: 永続キーバリューストア
        """
        self._store = store
        self._accounts: list[Account] = self._load()

    def register(self, email: str, password: str) -> None:
        """アカウントを登録する.

        Args:
            email: メールアドレス
            password: パスワード（平文）

        Raises:
            ValueError: メールアドレスまたはパスワードが空の場合
            DuplicateAccountError: 同じメールアドレスが登録済みの場合
        """
        account = Account(email=Email(email), password=password)
        if any(a.email == account.email for a in self._accounts):
            raise DuplicateAccountError(account.email)

        self._accounts.append(account)
        self._save()
        logger.info(f"Registered account {account.email}")

    def find_match(self, email: str, password: str) -> Account | None:
        """メールアドレスとパスワードが一致するアカウントを検索する."""
        if not email:
            return None
        email_vo = Email(email)
        for account in self._accounts:
            if account.matches(email_vo, password):
                return account
        return None

    def get_account_count(self) -> int:
        """登録済みアカウント数を取得する."""
        return len(self._accounts)

    def _load(self) -> list[Account]:
        raw = self._store.get(ACCOUNTS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning(f"Ignoring malformed {ACCOUNTS_KEY} value: {type(raw).__name__}")
            return []

        accounts: list[Account] = []
        for record in raw:
            try:
                accounts.append(self._from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed account record: {e}")
        return accounts

    def _save(self) -> None:
        self._store.set(ACCOUNTS_KEY, [self._to_record(a) for a in self._accounts])

    @staticmethod
    def _to_record(account: Account) -> dict[str, str]:
        """Account を永続化レコードに変換する."""
        return {"email": account.email.value, "password": account.password}

    @staticmethod
    def _from_record(record: dict[str, str]) -> Account:
        """永続化レコードから Account を復元する."""
        return Account(email=Email(record["email"]), password=record["password"])
