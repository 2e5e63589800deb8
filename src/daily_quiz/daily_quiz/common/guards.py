from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role
from ..users.service import SessionAccount


def store_session(account: SessionAccount) -> None:
    session["account_id"] = account.account_id
    session["email"] = account.email
    session["name"] = account.name
    session["role"] = account.role.value


def current_account() -> Optional[SessionAccount]:
    if "account_id" not in session:
        return None
    return SessionAccount(
        account_id=int(session["account_id"]),
        email=session.get("email", ""),
        name=session.get("name", ""),
        role=Role(session.get("role")),
    )


def render_forbidden():
    current_user = {"name": session.get("name"), "role": session.get("role")}
    return render_template("403.html", current_user=current_user), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "account_id" not in session:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login_form"))
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "account_id" not in session:
                return redirect(url_for("login_form"))
            if session.get("role") != role.value:
                return render_forbidden()
            return view(*args, **kwargs)

        return wrapper

    return decorator


student_required = role_required(Role.STUDENT)
faculty_required = role_required(Role.FACULTY)
