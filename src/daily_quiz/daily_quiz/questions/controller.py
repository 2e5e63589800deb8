from __future__ import annotations

import io
import logging

import qrcode
from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, session, url_for

from ..common.datetime_utils import parse_iso_date
from ..common.guards import current_account, faculty_required, student_required
from ..container import Container
from ..core.constants import OPTION_FIELDS
from ..core.enums import DashboardAlert, Role
from ..core.exceptions import AuthorizationError, DuplicateAnswerError, NoQuestionError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/welcome-page", endpoint="welcome_page")
    @student_required
    def welcome_page():
        if not container.question_service.todays_question():
            return redirect(url_for("dashboard", alert=DashboardAlert.NO_QUESTION.value))
        return render_template("welcome-page.html", user=current_account())

    @app.route("/questions", methods=["GET"], endpoint="questions")
    @student_required
    def questions():
        try:
            question = container.question_service.todays_question()
        except Exception:
            logger.exception("Failed to load today's question")
            return "Error fetching question", 500
        return render_template("questions.html", question=question)

    @app.route("/questions", methods=["POST"], endpoint="submit_answer")
    @student_required
    def submit_answer():
        try:
            container.question_service.submit_answer(current_account(), request.form.get("answer", ""))
            flash("Answer submitted!", "success")
        except NoQuestionError:
            return redirect(url_for("dashboard", alert=DashboardAlert.NO_QUESTION.value))
        except DuplicateAnswerError:
            return redirect(url_for("dashboard", alert=DashboardAlert.ALREADY_ANSWERED.value))
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "warning")
            return redirect(url_for("questions"))
        except Exception:
            logger.exception("Failed to submit answer")
            flash("System error while submitting the answer", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/create-form", methods=["GET", "POST"], endpoint="create_form")
    @faculty_required
    def create_form():
        if request.method == "POST":
            try:
                active_on_s = (request.form.get("active_on") or "").strip()
                container.question_service.create_question(
                    current_role=Role(session.get("role")),
                    text=request.form.get("sql_question", ""),
                    options={key: request.form.get(key, "") for key in OPTION_FIELDS},
                    correct_option=request.form.get("correct_option", ""),
                    active_on=parse_iso_date(active_on_s) if active_on_s else None,
                )
                flash("Question created!", "success")
                return redirect(url_for("dashboard"))
            except (ValidationError, AuthorizationError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Failed to create question")
                flash("System error while creating the question", "danger")

        return render_template("create-form.html", options=OPTION_FIELDS)

    @app.route("/faculty/qr/image", endpoint="faculty_qr_image")
    @faculty_required
    def faculty_qr_image():
        """QR code pointing students to today's question, for display in class."""
        try:
            qr = qrcode.QRCode(
                version=1,
                error_correction=qrcode.constants.ERROR_CORRECT_L,
                box_size=10,
                border=2,
            )
            qr.add_data(url_for("welcome_page", _external=True))
            qr.make(fit=True)

            img = qr.make_image(fill_color="black", back_color="white")

            buf = io.BytesIO()
            img.save(buf, format="PNG")
            buf.seek(0)

            return send_file(buf, mimetype="image/png")
        except Exception as e:
            logger.exception("Failed to render QR code")
            return jsonify({"success": False, "message": str(e)}), 500
