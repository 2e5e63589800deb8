from __future__ import annotations

import csv
import io
import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date
from ..common.guards import current_account, faculty_required, student_required
from ..container import Container
from ..core.enums import DashboardAlert, EligibilityStatus
from ..core.exceptions import NoQuestionError, ValidationError
from .service import CSV_FIELDS

logger = logging.getLogger(__name__)

VERDICT_ALERTS = {
    EligibilityStatus.NO_QUESTION: DashboardAlert.NO_QUESTION,
    EligibilityStatus.NOT_ATTEMPTED: DashboardAlert.NOT_DONE,
    EligibilityStatus.OUT_OF_RANGE: DashboardAlert.WRONG_DATE,
}


def register(app: Flask, container: Container) -> None:
    def _requested_day():
        date_s = (request.args.get("date") or "").strip()
        return parse_iso_date(date_s) if date_s else None

    def _faculty_filters() -> tuple[str, str]:
        source = request.form if request.method == "POST" else request.args
        return (source.get("classFilter") or "").strip(), (source.get("deptFilter") or "").strip()

    @app.route("/results", endpoint="results")
    @student_required
    def results():
        try:
            verdict = container.results_service.student_results(current_account(), _requested_day())
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("dashboard"))

        if not verdict.available:
            return redirect(url_for("dashboard", alert=VERDICT_ALERTS[verdict.status].value))

        return render_template(
            "results.html",
            user=current_account(),
            question=verdict.question,
            user_answer=verdict.user_answer,
        )

    @app.route("/results-faculty", methods=["GET", "POST"], endpoint="results_faculty")
    @faculty_required
    def results_faculty():
        class_filter, dept_filter = _faculty_filters()
        try:
            data = container.results_service.faculty_results(
                _requested_day(),
                class_filter=class_filter,
                department_filter=dept_filter,
            )
        except NoQuestionError:
            return redirect(url_for("dashboard", alert=DashboardAlert.NO_QUESTION.value))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("dashboard"))

        return render_template(
            "results-faculty.html",
            question=data.question,
            attempted=data.partition.attempted,
            unattempted=data.partition.unattempted,
            classes=data.partition.classes,
            departments=data.partition.departments,
            dateParam=request.args.get("date") or "",
            day=data.day.isoformat(),
            classFilter=data.class_filter,
            deptFilter=data.department_filter,
        )

    @app.route("/results-faculty.csv", endpoint="results_faculty_csv")
    @faculty_required
    def results_faculty_csv():
        class_filter, dept_filter = _faculty_filters()
        try:
            data = container.results_service.faculty_results(
                _requested_day(),
                class_filter=class_filter,
                department_filter=dept_filter,
            )
        except NoQuestionError:
            return redirect(url_for("dashboard", alert=DashboardAlert.NO_QUESTION.value))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("dashboard"))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in data.csv_rows():
            writer.writerow(row)

        filename = f"attendance_{data.day.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
