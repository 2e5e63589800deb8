from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "daily_quiz"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from daily_quiz.common.logging_config import configure_logging
from daily_quiz.database.bootstrap import apply_schema, list_tables
from daily_quiz.database.connection import DBConfig


def main() -> None:
    logger = configure_logging()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = list_tables(db_config)
    logger.info("Applied schema.sql -> %s (tables=%d)", DBConfig.from_dict(db_config).describe(), len(tables))


if __name__ == "__main__":
    main()
