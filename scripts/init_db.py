import argparse
import logging

from invoicing.config import load_settings
from invoicing.db.engine import create_db_engine, init_schema
from invoicing.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the invoicing tables.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop every table first (destroys data)",
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings)

    engine = create_db_engine(settings)
    try:
        init_schema(engine, reset=args.reset)
    finally:
        engine.dispose()
    logger.info("DB schema created.")


if __name__ == "__main__":
    main()
