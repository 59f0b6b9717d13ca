import logging

import coloredlogs

from hatemp.const import LOG_LEVELS

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M:%S"
FORMAT_DATETIME = f"{FORMAT_DATE} {FORMAT_TIME}"
FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s.%(funcName)s:%(lineno)d ─ %(message)s"


def enable_logging(log_level: LOG_LEVELS) -> None:
    """Set up colored logging for the hatemp logger.

    Library code never calls this; it is meant for the program that embeds hatemp.
    """

    logger = logging.getLogger("hatemp")

    # don't propagate to root - if the caller does a basicConfig on root we don't want
    # our logs going there too.
    logger.propagate = False

    logger.handlers.clear()

    # handler stays at NOTSET and the logger itself is clamped, otherwise lowering the
    # logger level later has no effect
    coloredlogs.install(level=logging.NOTSET, logger=logger, fmt=FMT, datefmt=FORMAT_DATETIME)

    # coloredlogs.install resets the logger to WARNING
    logger.setLevel(log_level)

    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.client").setLevel(logging.WARNING)
