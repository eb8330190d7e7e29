import logging

from station_normalizer.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger once for the application.

    The level defaults to `LOG_LEVEL` from the settings. Unknown level
    names fall back to INFO.
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
