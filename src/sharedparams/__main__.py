"""Run the main command-line interface of sharedparams."""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from sharedparams.cli import SharedParamsMain

SharedParamsMain.run_as_script()
