"""Logging utility for chinacoords"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('chinacoords')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNED: set = set()


def warn_once(warning: str) -> None:
    """Logs a warning the first time a given message is seen, and never again"""
    if warning in _WARNED:
        return

    LOGGER.warning(warning)
    _WARNED.add(warning)
