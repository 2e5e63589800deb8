from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import normalize_email, require_min_length
from ..core.constants import FACULTY_EMAIL_DOMAIN, MIN_PASSWORD_LENGTH, STUDENT_EMAIL_DOMAIN
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, InvalidDomainError, ProfileNotFoundError, ValidationError
from ..students.repository import StudentProfileRepository
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionAccount:
    """What we store into Flask session after login."""

    account_id: int
    email: str
    name: str
    role: Role


def role_for_email(email: str, *, student_domain: str, faculty_domain: str) -> Role:
    """Derive the role from the email domain suffix."""

    if email.endswith(student_domain):
        return Role.STUDENT
    if email.endswith(faculty_domain):
        return Role.FACULTY
    raise InvalidDomainError("Invalid email domain")


class AuthService:
    """Use case: authenticate account (login)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, email: str, password: str) -> SessionAccount:
        email = (email or "").strip().lower()
        account = self._accounts.get_by_email(email) if email else None
        if not account:
            logger.info("Login rejected: unknown email %s", email)
            raise AuthenticationError("Incorrect email or password")

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("Login rejected: wrong password for account %s", account.account_id)
            raise AuthenticationError("Incorrect email or password")

        return self.to_session(account)

    @staticmethod
    def to_session(account: Account) -> SessionAccount:
        return SessionAccount(
            account_id=account.account_id,
            email=account.email,
            name=account.name or account.email,
            role=account.role,
        )


class SignupService:
    """Use case: self-service sign-up for students and faculty."""

    def __init__(
        self,
        accounts: AccountRepository,
        profiles: StudentProfileRepository,
        *,
        student_domain: str = STUDENT_EMAIL_DOMAIN,
        faculty_domain: str = FACULTY_EMAIL_DOMAIN,
    ):
        self._accounts = accounts
        self._profiles = profiles
        self._student_domain = student_domain
        self._faculty_domain = faculty_domain

    def sign_up(self, email: str, password: str, *, name: Optional[str] = None) -> int:
        email = normalize_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        role = role_for_email(email, student_domain=self._student_domain, faculty_domain=self._faculty_domain)

        if self._accounts.get_by_email(email):
            raise ValidationError("An account with this email already exists")

        reg_no = None
        if role == Role.STUDENT:
            profile = self._profiles.get_by_email(email)
            if not profile:
                raise ProfileNotFoundError("Student info not found")
            name = profile.name
            reg_no = profile.reg_no
        else:
            name = (name or "").strip() or None

        account_id = self._accounts.create_account(
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
            name=name,
            reg_no=reg_no,
        )
        logger.info("Created %s account %s", role.value, account_id)
        return account_id
