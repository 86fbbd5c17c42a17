"""Package utilities of sharedparams.

Collects command-line utilities that work on shared parameter files.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'
