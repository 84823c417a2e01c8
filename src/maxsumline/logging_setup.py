import logging

from maxsumline import config


def configure_logging(level: str = config.DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s - %(message)s",
    )
