import pytest
from werkzeug.security import check_password_hash

from daily_quiz.core.enums import Role
from daily_quiz.core.exceptions import (
    AuthenticationError,
    InvalidDomainError,
    ProfileNotFoundError,
    ValidationError,
)
from daily_quiz.users.service import role_for_email

STUDENT_DOMAIN = "@btech.christuniversity.in"
FACULTY_DOMAIN = "@christuniversity.in"


@pytest.mark.parametrize(
    "email, role",
    [
        ("ana.li@btech.christuniversity.in", Role.STUDENT),
        ("prof.x@christuniversity.in", Role.FACULTY),
    ],
)
def test_role_derived_from_domain(email, role):
    assert role_for_email(email, student_domain=STUDENT_DOMAIN, faculty_domain=FACULTY_DOMAIN) == role


def test_other_domain_rejected():
    with pytest.raises(InvalidDomainError):
        role_for_email("someone@gmail.com", student_domain=STUDENT_DOMAIN, faculty_domain=FACULTY_DOMAIN)


def test_student_signup_copies_profile_and_hashes_password(container, accounts, profiles):
    profiles.add("Ana Li", "ana.li@btech.christuniversity.in", class_name="A", department="CSE", reg_no="2360101")

    account_id = container.signup_service.sign_up("Ana.Li@btech.christuniversity.in", "hunter22")

    account = accounts.get_by_id(account_id)
    assert account.role == Role.STUDENT
    assert account.name == "Ana Li"
    assert account.reg_no == "2360101"
    assert account.password_hash != "hunter22"
    assert check_password_hash(account.password_hash, "hunter22")


def test_student_signup_without_profile_fails(container):
    with pytest.raises(ProfileNotFoundError):
        container.signup_service.sign_up("ghost@btech.christuniversity.in", "hunter22")


def test_faculty_signup_needs_no_profile(container, accounts):
    account_id = container.signup_service.sign_up("prof.x@christuniversity.in", "hunter22", name="Prof X")

    account = accounts.get_by_id(account_id)
    assert account.role == Role.FACULTY
    assert account.name == "Prof X"
    assert account.reg_no is None


def test_duplicate_email_rejected(container, accounts):
    accounts.add("prof.x@christuniversity.in", name="Prof X", role=Role.FACULTY)

    with pytest.raises(ValidationError):
        container.signup_service.sign_up("prof.x@christuniversity.in", "hunter22")


def test_short_password_rejected(container):
    with pytest.raises(ValidationError):
        container.signup_service.sign_up("prof.x@christuniversity.in", "123")


def test_login_with_correct_password(container, accounts):
    accounts.add("prof.x@christuniversity.in", name="Prof X", role=Role.FACULTY, password="right-one")

    s = container.auth_service.authenticate("prof.x@christuniversity.in", "right-one")

    assert s.role == Role.FACULTY
    assert s.name == "Prof X"


@pytest.mark.parametrize("email, password", [("prof.x@christuniversity.in", "wrong"), ("nobody@christuniversity.in", "right-one")])
def test_login_rejects_bad_credentials(container, accounts, email, password):
    accounts.add("prof.x@christuniversity.in", name="Prof X", role=Role.FACULTY, password="right-one")

    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate(email, password)
