"""Package lib of sharedparams.

Collects general-purpose helpers that are not specific to
shared parameter files.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'
