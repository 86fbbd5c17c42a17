"""Test configuration for sharedparams.tests.

Defines fixtures and fixture factories used in multiple tests.

Fixtures
--------
check_log_records (factory)
    Raise unless caplog records are exactly as expected.
data_path
    Path to the top-level folder containing test data.
make_file (factory)
    Write text to a file in a temporary directory.
re_match (factory)
    Return a match object from a pattern and a string.
reset_package_logger (autouse)
    Undo the changes made by command-line utilities to the logger
    of the sharedparams package.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import logging
import re

from pytest_cases import fixture

from sharedparams.lib.log_utils import close_all_handlers

from .helpers import TEST_DATA


@fixture
def check_log_records(caplog):
    """Raise unless log records are exactly as expected."""
    def _check(expected_records):
        logged = tuple(r.getMessage() for r in caplog.records)
        assert len(logged) == len(expected_records)
        for log, expect in zip(logged, expected_records):
            if isinstance(expect, str):
                assert log == expect
            else:
                assert expect.fullmatch(log)
    return _check


@fixture(scope='session')
def re_match():  # This is actually a fixture factory
    """Return a re.match object from a pattern and a string."""
    def _match(pattern, string):
        return re.match(pattern, string)
    return _match


@fixture(scope='session')
def data_path():
    """Return the Path to the top-level folder containing test data."""
    return TEST_DATA


@fixture(name='make_file')
def factory_make_file(tmp_path):
    """Return a function that writes text to a file in tmp_path."""
    def _make(contents, name='shared_parameters.txt', encoding='utf-8'):
        file = tmp_path / name
        file.write_text(contents, encoding=encoding)
        return file
    return _make


@fixture(autouse=True)
def reset_package_logger():
    """Remove handlers and level of the 'sharedparams' logger after a test."""
    yield
    logger = logging.getLogger('sharedparams')
    close_all_handlers(logger)
    logger.setLevel(logging.NOTSET)
