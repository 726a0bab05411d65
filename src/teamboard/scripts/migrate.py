# src/teamboard/scripts/migrate.py
"""Apply Alembic migrations to the configured database."""
from __future__ import annotations

import os

from alembic import command
from alembic.config import Config

from teamboard.core.settings import settings

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
)


def build_config(database_url: str | None = None) -> Config:
    """Return an Alembic config pointed at the project's migrations."""
    cfg = Config(os.path.join(MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    cfg.set_main_option("sqlalchemy.url", database_url or settings.database_url_sync)
    return cfg


def run_upgrade_head(database_url: str | None = None) -> None:
    """Upgrade the database schema to the latest revision."""
    command.upgrade(build_config(database_url), "head")


if __name__ == "__main__":
    run_upgrade_head()
