from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.personnel_panel.personnel_panel.core.logger import logger
from src.personnel_panel.personnel_panel.database.bootstrap import apply_seed_sql, ensure_demo_employees


def main() -> None:
    load_dotenv(override=False)
    db_config = dict(load_settings().DB_CONFIG)

    added = ensure_demo_employees(db_config)
    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    logger.info(
        "Seeded %s@%s:%s/%s (%d demo employees added)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        added,
    )


if __name__ == "__main__":
    main()
