"""エンティティモジュール."""
from .account import Account
from .cart import Cart
from .cart_item import CartItem
from .like_registry import LikeRegistry
from .session import Session

__all__ = [
    "Account",
    "Cart",
    "CartItem",
    "LikeRegistry",
    "Session",
]
