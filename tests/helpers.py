"""Module helpers of sharedparams.tests.

Contains some useful general definitions that can be used when creating
or running tests.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from contextlib import contextmanager
from pathlib import Path

import pytest


TEST_DATA = Path(__file__).parent / '_test_data'

# A file in the older format (no DESCRIPTION and no USERMODIFIABLE
# columns), with one group and one parameter.
MINIMAL_FILE = (
    '*META\tVERSION\tMINVERSION\n'
    'META\t2\t1\n'
    '*GROUP\tID\tNAME\n'
    'GROUP\t1\tStructural\n'
    '*PARAM\tGUID\tNAME\tDATATYPE\tDATACATEGORY\tGROUP\tVISIBLE\n'
    'PARAM\t{abc-123}\tRebarSize\tLENGTH\tStructural\t1\t1'
    )


# ##############################   EXCEPTIONS   ###############################

class CustomTestException(BaseException):
    """A custom exception for checking try...except blocks."""


# ##############################   FUNCTIONS   ################################

@contextmanager
def not_raises(exception):
    """Fail if exception is raised."""
    try:
        yield
    except exception as exc:
        pytest.fail(f'Unexpectedly raised {exc!r}')

