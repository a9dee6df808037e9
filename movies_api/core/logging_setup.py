import logging

from movies_api.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: Settings) -> None:
    """
    Console logging for the service, driven by Settings.

    LOG_LEVEL applies to the movies_api loggers. SQLAlchemy engine logs
    stay at WARNING unless DB_ECHO is on, in which case the engine's own
    echo handler prints statements.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("movies_api").setLevel(level)
    if not settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
