"""Module constants of sharedparams.

Defines constants used throughout the sharedparams package, like the
names of the sections of a shared parameter file, the comment lines
written at its top, and a few limits. This module imports nothing
from the rest of the package to prevent cyclic imports.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

COMMENT_CHAR = '#'
DELIMITER = '\t'
FILE_SUFFIX = '.txt'          # The only acceptable extension
LOG_VERY_VERBOSE = 5          # A logging level below DEBUG
MAX_INPUT_SIZE = 16 * 1024**2  # Characters. Larger inputs are refused
PREAMBLE = (
    '# This is a Revit shared parameter file.',
    '# Do not edit manually.',
    )
SECTION_MARKER = '*'
