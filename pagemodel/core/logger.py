""" pagemodel logger """
import logging

from rich.logging import RichHandler


def init_logger(debug=False):
    """Initialize the logger"""

    logger = logging.getLogger(__name__.split(".")[0])
    for handler in list(logger.handlers):  # pragma: no cover
        logger.removeHandler(handler)

    logger.addHandler(
        RichHandler(
            rich_tracebacks=True,
            show_level=debug,
            show_path=debug,
            tracebacks_show_locals=debug,
        )
    )
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    if debug:  # pragma: no cover
        # selenium logs every wire command at DEBUG
        selenium_logger = logging.getLogger("selenium")
        for handler in list(selenium_logger.handlers):
            selenium_logger.removeHandler(handler)
        selenium_logger.addHandler(RichHandler())
        selenium_logger.setLevel(logging.DEBUG)
        logger.debug("Added rich.logging.RichHandler to logger: selenium")

    return logger
