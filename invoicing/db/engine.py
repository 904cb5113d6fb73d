# invoicing/db/engine.py

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url

from invoicing.config import Settings
from invoicing.db.schema import metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE rules unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings, **engine_kwargs) -> Engine:
    """
    Build the shared engine for DATABASE_URL.

    PostgreSQL connections require TLS unless DATABASE_SSL is off or the URL
    already carries its own sslmode.
    """
    url = make_url(settings.DATABASE_URL)
    connect_args = dict(engine_kwargs.pop("connect_args", {}))

    if url.get_backend_name() == "postgresql" and settings.DATABASE_SSL:
        if "sslmode" not in url.query:
            connect_args.setdefault("sslmode", "require")

    logger.info("Creating database engine for %s", url.render_as_string(hide_password=True))

    engine = create_engine(url, connect_args=connect_args, **engine_kwargs)

    if url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def init_schema(engine: Engine, reset: bool = False) -> None:
    if reset:
        logger.warning("Dropping all tables on %s", engine.url.render_as_string(hide_password=True))
        metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("Schema ready (%d tables).", len(metadata.tables))
