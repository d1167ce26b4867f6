"""値オブジェクトモジュール."""
from .catalog_item import CatalogItem
from .email import Email

__all__ = [
    "CatalogItem",
    "Email",
]
