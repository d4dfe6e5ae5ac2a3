import logging

logger = logging.getLogger("esfilters")


def warn(message: str) -> None:
    logger.warning(message)
