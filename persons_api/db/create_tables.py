"""Create the persons schema (no migrations; missing tables only)."""
from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from persons_api.core.config import get_settings
from persons_api.core.logging import configure_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # registers PersonRecord on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> list[str]:
    """Create missing tables and return the names of the ones that were new."""
    engine = get_engine()
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info("Created tables: %s", ", ".join(created))
    else:
        logger.debug("All tables already present on %s", engine.url.render_as_string(hide_password=True))
    return created


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    try:
        tables = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"OK: {len(tables)} table(s) created")
