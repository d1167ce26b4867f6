"""アプリケーションサービスモジュール."""
from .account_registry import AccountRegistry, DuplicateAccountError
from .cart_manager import AddToCartResult, CartManager, CheckoutResult
from .like_manager import LikeManager, ToggleLikeResult
from .session_manager import InvalidCredentialsError, SessionManager, UnauthenticatedError

__all__ = [
    # Services
    "AccountRegistry",
    "CartManager",
    "LikeManager",
    "SessionManager",
    # Results
    "AddToCartResult",
    "CheckoutResult",
    "ToggleLikeResult",
    # Errors
    "DuplicateAccountError",
    "InvalidCredentialsError",
    "UnauthenticatedError",
]
