"""Module input_reader of sharedparams.files.

Defines iterator classes for reading information line by line from
TextIOBase streams. Concrete subclasses decide what to return for
each line, and signal lines that contain nothing of interest by
raising ShouldSkipLineError.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from abc import ABC
from abc import abstractmethod
from collections.abc import Iterator
from io import TextIOBase
import logging

from sharedparams.constants import LOG_VERY_VERBOSE

_LOGGER = logging.getLogger(__name__)


class ShouldSkipLineError(Exception):
    """Exception raised when a line's contents should be skipped."""


class InputReader(Iterator):
    """Common base class for all input readers."""

    def __init__(self, noisy=True, logger=None):
        """Initialize base-class instance.

        Parameters
        ----------
        noisy : bool, optional
            Whether the reader will emit logging messages for
            lines that are skipped. Default is True.
        logger : logging.Logger, optional
            Where logging messages are emitted. If not given,
            the logger of this module is used.

        Returns
        -------
        None.
        """
        self.noisy = noisy
        self.logger = logger or _LOGGER
        self._current_line = 0
        super().__init__()

    @property
    def current_line(self):
        """Return the number of the last line read."""
        return self._current_line

    def __next__(self):
        """Return the next understandable information in the stream."""
        for line in self.stream:
            self._current_line += 1
            try:
                return self._read_one_line(line)
            except ShouldSkipLineError as exc:
                if self.noisy:
                    line = line.rstrip('\n')
                    reason = f' ({exc})' if str(exc) else ''
                    self.logger.log(LOG_VERY_VERBOSE,
                                    f'Skipping line {self._current_line}'
                                    f'{reason}: {line!r}.')
                continue
        raise StopIteration

    @property
    @abstractmethod
    def stream(self):
        """Return the input stream."""

    @abstractmethod
    def _read_one_line(self, line):
        """Return understandable information from `line`.

        This method is guaranteed to be called once on each
        line read from self.stream.

        Parameters
        ----------
        line : str
            A single line read from `self.stream.`

        Returns
        -------
        info : object
            Understandable information read from `line`. This is the
            same object returned whenever this reader is iterated over.

        Raises
        ------
        ShouldSkipLineError
            If `line` does not contain any valuable information that is
            worth returning while iterating over `self.stream`.
        """


# pylint: disable-next=too-few-public-methods   # Inherited from parent
class InputStreamReader(ABC, InputReader):
    """Class for reading input from a stream."""

    def __init__(self, source, noisy=True, logger=None):
        """Initialize instance.

        Parameters
        ----------
        source : TextIOBase
            Input stream to be read.
        noisy : bool, optional
            Whether the reader will emit logging messages for
            lines that are skipped. Default is True.
        logger : logging.Logger, optional
            Where logging messages are emitted. If not given,
            the logger of this module is used.

        Raises
        ------
        TypeError
            If `source` is not a TextIOBase instance.
        """
        if not isinstance(source, TextIOBase):
            raise TypeError('Input source must be a TextIOBase type object.')
        self._source = source
        super().__init__(noisy=noisy, logger=logger)

    @property
    def stream(self):
        """Return the input stream."""
        return self._source
