"""Module cli of sharedparams.

Defines the main command-line interface of sharedparams. All the
utilities in the sharedparams.utilities package are its children.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from types import MappingProxyType

from sharedparams.cli_base import SharedParamsCLI
from sharedparams.utilities.info import InfoCLI
from sharedparams.utilities.list_params import ListParametersCLI
from sharedparams.utilities.normalize import NormalizeCLI


class SharedParamsMain(SharedParamsCLI, cli_name='sharedparams'):
    """The main CLI interface of sharedparams."""

    children = (InfoCLI, ListParametersCLI, NormalizeCLI)
    child_aliases = MappingProxyType({'list': ('ls',)})
