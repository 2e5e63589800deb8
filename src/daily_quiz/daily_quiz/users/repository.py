from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Account


class AccountRepository(Protocol):
    """Repository interface for Account.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, account_id: int) -> Optional[Account]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Account]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Account]:
        raise NotImplementedError

    def create_account(
        self,
        *,
        email: str,
        password_hash: str,
        role: Role,
        name: Optional[str] = None,
        reg_no: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
