"""セッションエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import Email


@dataclass(frozen=True)
class Session:
    """現在ログイン中のアカウントを表すセッション."""

    email: Email
