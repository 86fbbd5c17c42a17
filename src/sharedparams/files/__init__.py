"""Package files of sharedparams.

Contains the modules for reading and writing shared parameter files:
splitting the text into sections, parsing and rendering the table
of each section according to a column schema, and reading/writing
whole files.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'
