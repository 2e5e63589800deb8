from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "daily_quiz"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from daily_quiz.common.logging_config import configure_logging
from daily_quiz.database.bootstrap import apply_seed_sql, clear_all, ensure_demo_accounts, ensure_demo_answers
from daily_quiz.database.connection import DBConfig


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed or clear the daily quiz database.")
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--seed", action="store_true", help="reset the tables and insert demo profiles, questions, accounts and answers")
    action.add_argument("--clear", action="store_true", help="delete all rows from every table")
    args = parser.parse_args(argv)

    logger = configure_logging()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = DBConfig.from_dict(db_config).describe()

    if args.clear:
        clear_all(db_config)
        logger.info("Cleared database -> %s", target)
        return 0

    clear_all(db_config)
    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_accounts(db_config)
    ensure_demo_answers(db_config)
    logger.info("Seeded database -> %s", target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
