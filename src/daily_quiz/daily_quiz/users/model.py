from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Domain entity: a login account.

    Note: Plain data object (no DB access code).
    """

    account_id: int
    email: str
    password_hash: str
    role: Role
    name: Optional[str] = None
    reg_no: Optional[str] = None
