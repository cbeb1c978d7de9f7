from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CPUINFO_PATH = Path("/proc/cpuinfo")
_SERIAL_PREFIX = "serial\t\t:"


def get_serial(cpuinfo: Path = CPUINFO_PATH) -> int:
    """Board serial number from the ``Serial`` line of cpuinfo, 0 if unavailable."""
    try:
        text = cpuinfo.read_text()
    except OSError as e:
        logger.debug("cpuinfo unavailable: %s", e)
        return 0

    serial = 0
    for line in text.splitlines():
        if line.lower().startswith(_SERIAL_PREFIX):
            try:
                serial = int(line[len(_SERIAL_PREFIX):].strip(), 16)
            except ValueError:
                logger.warning("Unparseable serial line in %s: %r", cpuinfo, line)
    return serial
