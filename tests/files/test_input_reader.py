"""Tests for module input_reader of sharedparams.files."""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from io import StringIO
import logging

import pytest
from pytest_cases import parametrize

from sharedparams.constants import LOG_VERY_VERBOSE
from sharedparams.files.input_reader import InputStreamReader
from sharedparams.files.input_reader import ShouldSkipLineError


def raise_on_skip(self, line):  # pylint: disable=unused-argument
    """Raise if line contains 'skip'."""
    # pylint: disable-next=magic-value-comparison
    if 'skip' in line:
        raise ShouldSkipLineError('Line contains \'skip\'')
    return line.strip()


# pylint: disable-next=too-few-public-methods  # Only one abstract
class MockInputStreamReader(InputStreamReader):
    """A concrete InputStreamReader for testing."""

    _read_one_line = raise_on_skip


class TestInputStreamReader:
    """Tests for the InputStreamReader class."""

    _valid = {
        'no skip': ('line1\nline2\nline3\n', ('line1', 'line2', 'line3')),
        'skip one': ('line1\nskip this line\nline3\n', ('line1', 'line3')),
        'skip last': ('line1\nskip this line\n', ('line1',)),
        }

    @parametrize('lines,expect', _valid.values(), ids=_valid)
    def test_iteration(self, lines, expect):
        """Check that iteration over a stream yields the expected lines."""
        reader = MockInputStreamReader(StringIO(lines))
        assert tuple(reader) == expect

    def test_invalid_input(self):
        """Check complaints when a non-stream object is given."""
        with pytest.raises(TypeError):
            MockInputStreamReader('not a stream')

    def test_current_line_updated(self):
        """Check that the line numbers are tracked."""
        reader = MockInputStreamReader(StringIO('line1\nskip\nline3\n'))
        assert not reader.current_line
        next(reader)
        assert reader.current_line == 1
        next(reader)
        # pylint: disable-next=magic-value-comparison
        assert reader.current_line == 3

    def test_log_skipped(self, caplog):
        """Check that skipped lines are logged at very verbose level."""
        reader = MockInputStreamReader(StringIO('skip\n'))
        with caplog.at_level(LOG_VERY_VERBOSE):
            tuple(reader)
        record, = caplog.records
        assert record.levelno == LOG_VERY_VERBOSE
        # pylint: disable-next=magic-value-comparison
        assert "Skipping line 1 (Line contains 'skip')" in record.getMessage()

    def test_not_noisy(self, caplog):
        """Check that nothing is logged if noisy is False."""
        reader = MockInputStreamReader(StringIO('skip\n'), noisy=False)
        with caplog.at_level(LOG_VERY_VERBOSE):
            tuple(reader)
        assert not caplog.records

    def test_custom_logger(self, caplog):
        """Check that skipped lines are logged to the logger given."""
        logger = logging.getLogger('custom_logger_for_input_reader')
        reader = MockInputStreamReader(StringIO('skip\n'), logger=logger)
        with caplog.at_level(LOG_VERY_VERBOSE):
            tuple(reader)
        record, = caplog.records
        assert record.name == logger.name
