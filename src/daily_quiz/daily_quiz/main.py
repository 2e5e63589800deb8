from __future__ import annotations

import atexit
import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS, DEFAULT_TIMEZONE, FACULTY_EMAIL_DOMAIN, STUDENT_EMAIL_DOMAIN
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_accounts, ensure_demo_answers, list_tables
from .questions.controller import register as register_questions
from .results.controller import register as register_results
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_accounts(db_config)
            ensure_demo_answers(db_config)
            logger.info("Demo seed ready")

        container = build_container(
            db_config=db_config,
            timezone=getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE),
            student_domain=getattr(settings, "STUDENT_EMAIL_DOMAIN", STUDENT_EMAIL_DOMAIN),
            faculty_domain=getattr(settings, "FACULTY_EMAIL_DOMAIN", FACULTY_EMAIL_DOMAIN),
        )
        atexit.register(container.close)

    register_users(app, container)
    register_questions(app, container)
    register_results(app, container)

    return app
