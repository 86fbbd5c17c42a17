"""Module log_utils of sharedparams.lib.

Logging setup for the command-line utilities of sharedparams.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import logging

from sharedparams.constants import LOG_VERY_VERBOSE

logging.addLevelName(LOG_VERY_VERBOSE, 'VERY_VERBOSE')


def close_all_handlers(logger):
    """Detach all handlers from `logger`, then flush and close them."""
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):  # Stream was closed elsewhere
            pass


def debug_or_lower(logger):
    """Return whether `logger` emits DEBUG messages."""
    return logger.getEffectiveLevel() <= logging.DEBUG


def prepare_cli_logger(logger, verbose=False):
    """Make `logger` write formatted messages to the standard error.

    Parameters
    ----------
    logger : logging.Logger
        The logger to prepare. Handlers it already has are closed.
    verbose : bool, optional
        Whether DEBUG messages are emitted. Default is False,
        i.e., only INFO and above.
    """
    close_all_handlers(logger)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    handler = logging.StreamHandler()  # sys.stderr
    handler.setFormatter(CliLogFormatter())
    logger.addHandler(handler)


class CliLogFormatter(logging.Formatter):
    """Formatter that prefixes messages according to their level.

    Levels below DEBUG (e.g., VERY_VERBOSE) look like DEBUG. Custom
    levels between the standard ones have no prefix.
    """

    prefixes = {
        logging.DEBUG: 'dbg: ',
        logging.WARNING: '# WARNING: ',
        logging.ERROR: '### ERROR ### ',
        logging.CRITICAL: '### CRITICAL ### ',
        }

    def format(self, record):
        """Return the text of `record`, with its level prefix."""
        level = max(record.levelno, logging.DEBUG)
        return self.prefixes.get(level, '') + super().format(record)
