"""ドメイン層モジュール."""
from .entities import Account, Cart, CartItem, LikeRegistry, Session
from .identifiers import BookId
from .ports import KeyValueStore
from .services import CatalogFilter
from .value_objects import CatalogItem, Email

__all__ = [
    # Identifiers
    "BookId",
    # Value Objects
    "CatalogItem",
    "Email",
    # Entities
    "Account",
    "Cart",
    "CartItem",
    "LikeRegistry",
    "Session",
    # Ports
    "KeyValueStore",
    # Services
    "CatalogFilter",
]
