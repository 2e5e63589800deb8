from __future__ import annotations

from datetime import date, datetime

import pytest

from daily_quiz.core.enums import Role
from daily_quiz.main import create_app


@pytest.fixture
def app(container, frozen_clock):
    app = create_app(container=container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, account):
    with client.session_transaction() as sess:
        sess["account_id"] = account.account_id
        sess["email"] = account.email
        sess["name"] = account.name
        sess["role"] = account.role.value


@pytest.fixture
def ana(accounts, profiles):
    profiles.add("Ana Li", "ana.li@btech.christuniversity.in", class_name="A", department="CSE", reg_no="2360101")
    return accounts.add("ana.li@btech.christuniversity.in", name="Ana Li", reg_no="2360101")


@pytest.fixture
def prof(accounts):
    return accounts.add("prof.x@christuniversity.in", name="Prof X", role=Role.FACULTY)


def test_signup_then_login(client, profiles, accounts):
    profiles.add("Ana Li", "ana.li@btech.christuniversity.in", class_name="A", department="CSE")

    r = client.post("/sign-up", data={"mail": "ana.li@btech.christuniversity.in", "password": "hunter22"})
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/login-form")

    r = client.post("/log-in", data={"mail": "ana.li@btech.christuniversity.in", "password": "hunter22"})
    assert r.status_code == 302
    with client.session_transaction() as sess:
        assert sess["role"] == "student"
        assert sess["name"] == "Ana Li"


def test_signup_with_foreign_domain_is_rejected(client):
    r = client.post("/sign-up", data={"mail": "x@gmail.com", "password": "hunter22"})

    assert r.status_code == 400
    assert b"Invalid email domain" in r.data


def test_dashboard_requires_login(client):
    r = client.get("/dashboard")

    assert r.status_code == 302
    assert "/login-form" in r.headers["Location"]


def test_dashboard_shows_alert(client, ana):
    _login(client, ana)

    r = client.get("/dashboard?alert=wrongDate")

    assert r.status_code == 200
    assert b"outside your answered history" in r.data


def test_welcome_page_redirects_without_question(client, ana):
    _login(client, ana)

    r = client.get("/welcome-page")

    assert r.status_code == 302
    assert "alert=noQuestion" in r.headers["Location"]


def test_student_answers_and_views_results(client, ana, questions, answers, frozen_clock):
    questions.add(frozen_clock.replace(hour=8))
    _login(client, ana)

    r = client.post("/questions", data={"answer": "option2"})
    assert r.status_code == 302
    assert len(answers.records) == 1

    r = client.post("/questions", data={"answer": "option3"})
    assert "alert=alreadyAnswered" in r.headers["Location"]

    r = client.get("/results")
    assert r.status_code == 200
    assert b"(your answer)" in r.data


def test_results_out_of_range_redirects(client, ana, questions, answers, tz):
    questions.add(datetime(2024, 2, 28, 9, tzinfo=tz))
    questions.add(datetime(2024, 3, 5, 9, tzinfo=tz))
    answers.add(ana, date(2024, 2, 28))
    _login(client, ana)

    r = client.get("/results?date=2024-03-05")

    assert r.status_code == 302
    assert "alert=wrongDate" in r.headers["Location"]


def test_results_not_attempted_redirects(client, ana, questions, tz):
    questions.add(datetime(2024, 3, 1, 9, tzinfo=tz))
    _login(client, ana)

    r = client.get("/results")

    assert "alert=notDone" in r.headers["Location"]


def test_student_cannot_open_faculty_results(client, ana):
    _login(client, ana)

    r = client.get("/results-faculty")

    assert r.status_code == 403


def test_faculty_results_filtered_by_class(client, prof, accounts, profiles, questions, answers, tz):
    for i, cls in enumerate(["A", "B"], start=1):
        email = f"s{i}@btech.christuniversity.in"
        profiles.add(f"Student {i}", email, class_name=cls, department="CSE")
        accounts.add(email, name=f"Student {i}")
    questions.add(datetime(2024, 3, 1, 9, tzinfo=tz))
    _login(client, prof)

    r = client.post("/results-faculty?date=2024-03-01", data={"classFilter": "B", "deptFilter": ""})

    assert r.status_code == 200
    assert b"Student 2" in r.data
    assert b"Student 1" not in r.data


def test_faculty_csv_export(client, prof, ana, questions, answers, tz):
    questions.add(datetime(2024, 3, 1, 9, tzinfo=tz), correct_option="option2")
    answers.add(ana, date(2024, 3, 1), "option2")
    _login(client, prof)

    r = client.get("/results-faculty.csv?date=2024-03-01")

    assert r.status_code == 200
    assert r.mimetype == "text/csv"
    body = r.data.decode("utf-8-sig").splitlines()
    assert body[0] == "status,reg_no,name,class,department,chosen_option,is_correct"
    assert body[1] == "attempted,2360101,Ana Li,A,CSE,option2,yes"


def test_faculty_results_without_question_redirects(client, prof):
    _login(client, prof)

    r = client.get("/results-faculty?date=2024-03-01")

    assert "alert=noQuestion" in r.headers["Location"]


def test_faculty_creates_question(client, prof, questions, tz):
    _login(client, prof)

    r = client.post(
        "/create-form",
        data={
            "sql_question": "Which keyword removes duplicates?",
            "option1": "UNIQUE",
            "option2": "DISTINCT",
            "option3": "DIFFERENT",
            "option4": "SINGLE",
            "correct_option": "option2",
            "active_on": "2024-03-02",
        },
    )

    assert r.status_code == 302
    assert questions.questions[0].active_on == datetime(2024, 3, 2, tzinfo=tz)


def test_faculty_qr_code_is_png(client, prof):
    _login(client, prof)

    r = client.get("/faculty/qr/image")

    assert r.status_code == 200
    assert r.mimetype == "image/png"
