"""カート管理サービス."""
import logging
from dataclasses import dataclass

from bookshelf.domain.entities import Cart, CartItem
from bookshelf.domain.identifiers import BookId
from bookshelf.domain.value_objects import CatalogItem

from .session_manager import SessionManager, UnauthenticatedError

logger = logging.getLogger(__name__)

LOGIN_TO_ADD_MESSAGE = "Login to add to cart"
LOGIN_TO_CHECKOUT_MESSAGE = "Login to checkout"
EMPTY_CART_MESSAGE = "Your cart is empty."
PAYMENT_SUCCESSFUL_MESSAGE = "Payment successful!"


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果.

    success が False の場合は未ログインによる拒否で、message を利用者に表示する。
    """

    success: bool
    added: bool
    item_count: int
    message: str | None = None


@dataclass(frozen=True)
class CheckoutResult:
    """購入手続き結果."""

    success: bool
    items: list[CartItem]
    message: str


class CartManager:
    """ログイン中のみ有効なカートを管理する.

    カートは永続化せず、ログアウトと購入手続きで空になる。
    """

    def __init__(self, session_manager: SessionManager) -> None:
        """初期化.

        Args:
            session_manager: セッション管理
        """
        self._session_manager = session_manager
        self._cart = Cart()
        session_manager.add_logout_listener(self.clear_cart)

    def add_to_cart(self, item: CatalogItem) -> AddToCartResult:
        """書籍をカートに追加する.

        同じIDの書籍が既にある場合は何もしない。
        """
        try:
            self._session_manager.require_session(LOGIN_TO_ADD_MESSAGE)
        except UnauthenticatedError as e:
            logger.info(f"Refused to add book {item.book_id} to cart: {e}")
            return AddToCartResult(
                success=False,
                added=False,
                item_count=self._cart.get_item_count(),
                message=str(e),
            )

        added = self._cart.add_item(item) is not None
        if not added:
            logger.debug(f"Book {item.book_id} is already in the cart")
        return AddToCartResult(
            success=True,
            added=added,
            item_count=self._cart.get_item_count(),
        )

    def clear_cart(self) -> None:
        """カートを空にする."""
        self._cart.clear()

    def checkout(self) -> CheckoutResult:
        """購入手続きを行い、カートを空にする."""
        try:
            self._session_manager.require_session(LOGIN_TO_CHECKOUT_MESSAGE)
        except UnauthenticatedError as e:
            return CheckoutResult(success=False, items=[], message=str(e))

        if self._cart.is_empty():
            return CheckoutResult(success=False, items=[], message=EMPTY_CART_MESSAGE)

        items = self._cart.get_items()
        self._cart.clear()
        logger.info(f"Checked out {len(items)} books")
        return CheckoutResult(success=True, items=items, message=PAYMENT_SUCCESSFUL_MESSAGE)

    def get_items(self) -> list[CartItem]:
        """カート内のアイテムを追加順で取得する."""
        return self._cart.get_items()

    def get_item_count(self) -> int:
        """アイテム数を取得する."""
        return self._cart.get_item_count()

    def contains(self, book_id: BookId) -> bool:
        """指定IDの書籍がカートにあるか判定する."""
        return self._cart.contains(book_id)
