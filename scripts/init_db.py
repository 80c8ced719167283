from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from worktime.database.bootstrap import apply_schema, list_tables
from worktime.database.connection import DBConfig
from worktime.settings import get_settings_module

logger = logging.getLogger("worktime.scripts.init_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    logger.info("OK: Applied schema.sql -> %s (tables=%d)", DBConfig.from_dict(db_config).describe(), len(tables))


if __name__ == "__main__":
    main()
