from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from worktime.database.bootstrap import apply_seed_sql, ensure_admin_user
from worktime.database.connection import DBConfig
from worktime.settings import get_settings_module

logger = logging.getLogger("worktime.scripts.seed_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config)

    if not settings.ADMIN_PASSWORD:
        raise SystemExit("ADMIN_PASSWORD is empty; set it before seeding the admin login.")
    ensure_admin_user(db_config, username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD)

    logger.info("OK: Seeded database -> %s", DBConfig.from_dict(db_config).describe())


if __name__ == "__main__":
    main()
