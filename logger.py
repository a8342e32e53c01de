import logging
import sys

FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def make_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(h)
    return logger
