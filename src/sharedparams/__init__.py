"""====================
    sharedparams
====================

Read, edit, and write Revit shared parameter files.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'
__version__ = '0.3.0'


GLOBALS = {
    'version': __version__,
    'version_message': ('sharedparams (Revit shared parameter files) '
                        f'v{__version__}'),
    }

# pylint: disable=wrong-import-position
from sharedparams.document import SharedParameterFile
from sharedparams.records import Group
from sharedparams.records import Metadata
from sharedparams.records import Parameter
from sharedparams.units import ParameterType
from sharedparams.units import UnitGroup
from sharedparams.units import UnitType
