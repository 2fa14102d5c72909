"""Database initialization utilities."""

import logging

from sqlalchemy import Engine

from gtd.db.base import Base, create_db_engine
from gtd.db.tables import TaskRecord  # noqa: F401 - ensures models are registered

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created url=%s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    from gtd.core.logging import configure_logging
    from gtd.core.settings import get_settings

    settings = get_settings()
    configure_logging(settings.log_level)
    db_engine = create_db_engine(settings.database_url_resolved, pool_size=settings.db_pool_size)
    try:
        init_db(db_engine)
    finally:
        db_engine.dispose()
