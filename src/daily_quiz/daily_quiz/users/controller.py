from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.guards import current_account, login_required, store_session
from ..container import Container
from ..core.enums import DashboardAlert
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)

ALERT_MESSAGES = {
    DashboardAlert.NO_QUESTION.value: "No question is available for that day.",
    DashboardAlert.NOT_DONE.value: "You have not answered the question for that day.",
    DashboardAlert.WRONG_DATE.value: "That date is outside your answered history.",
    DashboardAlert.ALREADY_ANSWERED.value: "You have already answered today's question.",
}


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html", user=current_account())

    @app.route("/login-form", endpoint="login_form")
    def login_form():
        if "account_id" in session:
            return redirect(url_for("dashboard"))
        return render_template("login-form.html")

    @app.route("/log-in", methods=["POST"], endpoint="log_in")
    def log_in():
        email = request.form.get("mail", "")
        password = request.form.get("password", "")

        try:
            account = container.auth_service.authenticate(email, password)
            session.clear()
            session.permanent = True
            store_session(account)
            return redirect(url_for("index"))
        except AuthenticationError as e:
            flash(str(e), "danger")
        except Exception as e:
            logger.exception("Login failed")
            if bool(app.config.get("DEBUG", False)):
                flash(f"System error during login: {e}", "danger")
            else:
                flash("System error during login", "danger")

        return redirect(url_for("login_form"))

    @app.route("/signup-form", endpoint="signup_form")
    def signup_form():
        return render_template("signup-form.html")

    @app.route("/sign-up", methods=["POST"], endpoint="sign_up")
    def sign_up():
        email = request.form.get("mail", "")
        password = request.form.get("password", "")
        name = request.form.get("name")

        try:
            container.signup_service.sign_up(email, password, name=name)
            flash("Account created, please log in.", "success")
            return redirect(url_for("login_form"))
        except ValidationError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Sign-up failed")
            flash("Error signing up", "danger")

        return render_template("signup-form.html"), 400

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        return redirect(url_for("index"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        alert = request.args.get("alert")
        return render_template(
            "dashboard.html",
            user=current_account(),
            alert=alert,
            alert_message=ALERT_MESSAGES.get(alert or ""),
        )
