# invoicing/logging_config.py

import logging

from invoicing.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.INFO if settings.is_production else logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # SQL echo is left to SQLAlchemy's own flag
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
