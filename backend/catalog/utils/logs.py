import logging
import sys

ROOT_LOGGER = "catalog"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stdout handler to the "catalog" logger. Safe to call more than
    once (tests and the app lifespan both do); the handler is only added the
    first time.
    """
    log = logging.getLogger(ROOT_LOGGER)
    log.setLevel(level.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log


def get_logger(area: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{area}")
