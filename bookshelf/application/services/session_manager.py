"""セッション管理サービス."""
import logging
from collections.abc import Callable

from bookshelf.domain.entities import Session
from bookshelf.domain.ports import KeyValueStore
from bookshelf.domain.value_objects import Email

from .account_registry import AccountRegistry

logger = logging.getLogger(__name__)

SESSION_KEY = "session"


class InvalidCredentialsError(Exception):
    """メールアドレスまたはパスワードが一致しないエラー."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class UnauthenticatedError(Exception):
    """ログインが必要な操作を未ログインで行ったエラー."""

    def __init__(self, message: str = "Login required") -> None:
        super().__init__(message)


class SessionManager:
    """現在のログイン状態を管理する.

    状態は未ログイン（None）とログイン中（Session）の2つ。
    ログイン状態はストアに保存され、再構築時に復元される。
    """

    def __init__(self, store: KeyValueStore, account_registry: AccountRegistry) -> None:
        """初期化.

        Args:
            store: 永続キーバリューストア
            account_registry: 認証に使うアカウント登録簿
        """
        self._store = store
        self._account_registry = account_registry
        self._logout_listeners: list[Callable[[], None]] = []
        self._session: Session | None = self._load()

    def add_logout_listener(self, listener: Callable[[], None]) -> None:
        """ログアウト時に呼び出すコールバックを登録する."""
        self._logout_listeners.append(listener)

    def login(self, email: str, password: str) -> Session:
        """ログインする.

        既にログイン中の場合は認証情報を確認した上で現在のセッションを返す。

        Returns:
            現在のセッション

        Raises:
            InvalidCredentialsError: 一致するアカウントがない場合
        """
        account = self._account_registry.find_match(email, password)
        if account is None:
            raise InvalidCredentialsError()

        if self._session is not None:
            logger.debug(f"Already logged in as {self._session.email}")
            return self._session

        self._session = Session(email=account.email)
        self._store.set(SESSION_KEY, {"email": account.email.value})
        logger.info(f"Logged in as {account.email}")
        return self._session

    def logout(self) -> None:
        """ログアウトする（未ログインなら何もしない）."""
        if self._session is None:
            logger.debug("Logout requested without an active session")
            return

        email = self._session.email
        self._session = None
        self._store.remove(SESSION_KEY)
        for listener in self._logout_listeners:
            listener()
        logger.info(f"Logged out {email}")

    def current(self) -> Session | None:
        """現在のセッションを取得する."""
        return self._session

    def is_authenticated(self) -> bool:
        """ログイン中か判定する."""
        return self._session is not None

    def require_session(self, message: str = "Login required") -> Session:
        """現在のセッションを取得する.

        Raises:
            UnauthenticatedError: 未ログインの場合
        """
        if self._session is None:
            raise UnauthenticatedError(message)
        return self._session

    def _load(self) -> Session | None:
        raw = self._store.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            return Session(email=Email(raw["email"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring malformed {SESSION_KEY} value: {e}")
            return None
