"""ドメインサービスモジュール."""
from .catalog_filter import CatalogFilter

__all__ = [
    "CatalogFilter",
]
