"""アプリケーション層モジュール."""
from .app_state import AppState
from .services import (
    AccountRegistry,
    AddToCartResult,
    CartManager,
    CheckoutResult,
    DuplicateAccountError,
    InvalidCredentialsError,
    LikeManager,
    SessionManager,
    ToggleLikeResult,
    UnauthenticatedError,
)

__all__ = [
    # Facade
    "AppState",
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
