"""識別子モジュール."""
from .book_id import BookId

__all__ = [
    "BookId",
]
