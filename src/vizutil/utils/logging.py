"""The ``vizutil`` logger.

Library code logs through :data:`logger` and never configures output itself;
until :func:`configure_logging` is called the records go nowhere.  The CLI maps
its ``--log-level none|info|debug`` flag onto this module.
"""

import logging

logger = logging.getLogger("vizutil")
logger.addHandler(logging.NullHandler())

_LEVELS = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def level_from_name(name: str | None) -> int:
    """``"debug"`` -> ``logging.DEBUG``; empty or unrecognised names give WARNING."""
    if not name:
        return logging.WARNING
    return _LEVELS.get(str(name).strip().lower(), logging.WARNING)


def configure_logging(enabled: bool = True, level: int = logging.INFO) -> None:
    """Send ``vizutil`` records to stderr at ``level``, or mute them.

    Calling it again replaces the previous handler rather than adding a
    second one, so repeated CLI invocations in one process print each record
    once.  Fit decisions and config file loading are logged at DEBUG.
    """

    for h in list(logger.handlers):
        logger.removeHandler(h)

    if not enabled:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


__all__ = ["logger", "configure_logging", "level_from_name"]
