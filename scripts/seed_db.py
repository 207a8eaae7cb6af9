from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_roster.attendance_roster.database.bootstrap import apply_seed_sql
from src.attendance_roster.attendance_roster.database.url import effective_db_config


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    db_config = effective_db_config(dict(settings.DB_CONFIG), settings.DATABASE_URL)

    apply_seed_sql(db_config)
    print(f"OK: Seeded demo roster -> {db_config.describe()}")


if __name__ == "__main__":
    main()
