"""Logging utility for latlong"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('latlong')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

# Rendered messages already emitted
_WARNINGS = set()


def warn_once(msg: str, *args) -> None:
    """
    Logs a warning only the first time a given message (after %-style
    argument substitution) is seen in this process.

    Args:
        msg:
            The warning, optionally with %-style placeholders

        *args:
            Values substituted into the placeholders

    Returns:
        None
    """
    rendered = msg % args if args else msg
    if rendered in _WARNINGS:
        return

    LOGGER.warning(rendered)
    _WARNINGS.add(rendered)
