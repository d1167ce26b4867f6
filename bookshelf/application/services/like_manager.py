"""いいね管理サービス."""
import logging
from dataclasses import dataclass

from bookshelf.domain.entities import LikeRegistry
from bookshelf.domain.identifiers import BookId
from bookshelf.domain.ports import KeyValueStore

from .session_manager import SessionManager, UnauthenticatedError

logger = logging.getLogger(__name__)

LIKES_KEY = "likes"
LOGIN_TO_LIKE_MESSAGE = "Login to like a book"


@dataclass(frozen=True)
class ToggleLikeResult:
    """いいね切り替え結果.

    success が False の場合は未ログインによる拒否で、message を利用者に表示する。
    """

    success: bool
    liked: bool
    like_count: int
    message: str | None = None


class LikeManager:
    """書籍ごとのいいねを管理する.

    いいねはログアウト後も残る。変更のたびに登録簿全体をストアに書き直す。
    """

    def __init__(self, store: KeyValueStore, session_manager: SessionManager) -> None:
        """初期化.

        Args:
            store: 永続キーバリューストア
            session_manager: セッション管理
        """
        self._store = store
        self._session_manager = session_manager
        self._registry = self._load()

    def toggle_like(self, book_id: BookId) -> ToggleLikeResult:
        """現在のアカウントのいいねを切り替える."""
        try:
            session = self._session_manager.require_session(LOGIN_TO_LIKE_MESSAGE)
        except UnauthenticatedError as e:
            logger.info(f"Refused to toggle like on book {book_id}: {e}")
            return ToggleLikeResult(
                success=False,
                liked=False,
                like_count=self._registry.count(book_id),
                message=str(e),
            )

        liked = self._registry.toggle(book_id, session.email)
        self._store.set(LIKES_KEY, self._registry.to_dict())
        return ToggleLikeResult(
            success=True,
            liked=liked,
            like_count=self._registry.count(book_id),
        )

    def has_liked(self, book_id: BookId) -> bool:
        """現在のアカウントがいいねしているか判定する（未ログインならFalse）."""
        session = self._session_manager.current()
        if session is None:
            return False
        return self._registry.has_liked(book_id, session.email)

    def like_count(self, book_id: BookId) -> int:
        """いいね数を取得する."""
        return self._registry.count(book_id)

    def _load(self) -> LikeRegistry:
        raw = self._store.get(LIKES_KEY)
        if raw is None:
            return LikeRegistry()
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring malformed {LIKES_KEY} value: {type(raw).__name__}")
            return LikeRegistry()

        entries: dict[str, list[str]] = {}
        for key, emails in raw.items():
            try:
                BookId.from_key(key)
            except ValueError as e:
                logger.warning(f"Skipping malformed like entry: {e}")
                continue
            if not isinstance(emails, list):
                logger.warning(f"Skipping malformed like entry for book {key}")
                continue
            valid = [email for email in emails if isinstance(email, str) and email]
            if len(valid) != len(emails):
                logger.warning(f"Dropped {len(emails) - len(valid)} malformed likes for book {key}")
            entries[key] = valid
        return LikeRegistry.from_dict(entries)
