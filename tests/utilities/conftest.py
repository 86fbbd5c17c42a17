"""Test configuration for tests/utilities.

Fixtures
--------
shared_parameters_stream
    Mimic users piping a shared parameter file to sys.stdin.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import io

from pytest_cases import fixture


@fixture
def shared_parameters_stream(mocker, data_path):
    """Replace sys.stdin with a readable stream read from a test file."""
    def _patch(file_name):
        file = data_path / file_name
        contents = file.read_text(encoding='utf-8')
        return mocker.patch('sys.stdin', io.StringIO(contents))
    return _patch
