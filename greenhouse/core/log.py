import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    global _configured
    if _configured:
        return

    logger = logging.getLogger()
    logger.setLevel((level or settings.log_level).upper())

    fmt = logging.Formatter(_FORMAT)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Rotating file (avoid filling SD card)
    fh = RotatingFileHandler(
        log_file or settings.log_file, maxBytes=2_000_000, backupCount=5
    )
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # pymodbus logs every frame at INFO
    logging.getLogger("pymodbus").setLevel(logging.WARNING)

    _configured = True
