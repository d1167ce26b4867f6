"""アプリケーション状態ファサード."""
from bookshelf.domain.entities import CartItem, Session
from bookshelf.domain.identifiers import BookId
from bookshelf.domain.ports import KeyValueStore
from bookshelf.domain.value_objects import CatalogItem

from .services import (
    AccountRegistry,
    AddToCartResult,
    CartManager,
    CheckoutResult,
    LikeManager,
    SessionManager,
    ToggleLikeResult,
)


class AppState:
    """アカウント・セッション・カート・いいねをまとめた状態ハンドル.

    構築時に一度だけストアから状態を読み込む。画面側はこのハンドルを
    受け取り、操作の後に各プロパティを読み直して描画する。
    """

    def __init__(self, store: KeyValueStore) -> None:
        """初期化.

        Args:
            store: 永続キーバリューストア
        """
        self.accounts = AccountRegistry(store)
        self.sessions = SessionManager(store, self.accounts)
        self.carts = CartManager(self.sessions)
        self.likes = LikeManager(store, self.sessions)

    @property
    def session(self) -> Session | None:
        """現在のセッション."""
        return self.sessions.current()

    @property
    def cart(self) -> list[CartItem]:
        """カート内のアイテム."""
        return self.carts.get_items()

    @property
    def cart_count(self) -> int:
        """カート内のアイテム数."""
        return self.carts.get_item_count()

    def register(self, email: str, password: str) -> None:
        """アカウントを登録する."""
        self.accounts.register(email, password)

    def login(self, email: str, password: str) -> Session:
        """ログインする."""
        return self.sessions.login(email, password)

    def logout(self) -> None:
        """ログアウトする."""
        self.sessions.logout()

    def add_to_cart(self, item: CatalogItem) -> AddToCartResult:
        """書籍をカートに追加する."""
        return self.carts.add_to_cart(item)

    def clear_cart(self) -> None:
        """カートを空にする."""
        self.carts.clear_cart()

    def checkout(self) -> CheckoutResult:
        """購入手続きを行う."""
        return self.carts.checkout()

    def is_in_cart(self, book_id: int) -> bool:
        """指定IDの書籍がカートにあるか判定する."""
        return self.carts.contains(BookId(book_id))

    def toggle_like(self, book_id: int) -> ToggleLikeResult:
        """いいねを切り替える."""
        return self.likes.toggle_like(BookId(book_id))

    def has_liked(self, book_id: int) -> bool:
        """現在のアカウントがいいねしているか判定する."""
        return self.likes.has_liked(BookId(book_id))

    def like_count(self, book_id: int) -> int:
        """いいね数を取得する."""
        return self.likes.like_count(BookId(book_id))
