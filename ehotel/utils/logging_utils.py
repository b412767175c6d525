import logging

from ehotel.config import LOG_LEVEL


def setup_logger(name: str) -> logging.Logger:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    )
    return logging.getLogger(name)
