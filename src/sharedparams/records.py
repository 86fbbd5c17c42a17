"""Module records of sharedparams.

Defines the three kinds of records contained in a shared parameter
file: Metadata (one per file, from the META section), Group (from
the GROUP section) and Parameter (from the PARAM section).
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from dataclasses import dataclass
from dataclasses import field

from sharedparams.units import ParameterType
from sharedparams.units import UnitType
from sharedparams.units import get_unit_type

DEFAULT_VERSION = 2
DEFAULT_MIN_VERSION = 1


@dataclass
class Metadata:
    """Format information of a shared parameter file.

    Attributes
    ----------
    version : int
        The version of the file format.
    min_version : int
        The minimum version of the file format that a reader
        should support to understand the file.
    """

    version: int = DEFAULT_VERSION
    min_version: int = DEFAULT_MIN_VERSION


@dataclass
class Group:
    """A named group of shared parameters."""

    id: int
    name: str


@dataclass
class Parameter:
    """The definition of a shared parameter.

    Attributes
    ----------
    guid : str
        The unique identifier of this parameter, as found in the file.
    name : str
        The name of this parameter.
    data_type : ParameterType
        The type of the values this parameter can take.
    data_category : str
        Additional information on `data_type`. Typically only used
        for FAMILYTYPE parameters. May be empty.
    group_id : int
        The id of the Group this parameter belongs to.
    visible : bool
        Whether this parameter is shown to users.
    description : str
        A description of this parameter. Older files have none.
    user_modifiable : bool
        Whether users are allowed to edit the value of this
        parameter. Older files do not specify it.
    group_name : str
        The name of the Group with `group_id`. This is set when the
        file is loaded and is NOT updated automatically when either
        `group_id` or the groups of the file change. An empty string
        if no group has `group_id`.
    unit_type : UnitType
        The unit associated with `data_type`. Computed at creation
        and when the file is loaded, but NOT updated automatically
        when `data_type` changes. UT_UNDEFINED for data types that
        have no unit.
    """

    guid: str
    name: str
    data_type: ParameterType = ParameterType.TEXT
    data_category: str = ''
    group_id: int = 0
    visible: bool = True
    description: str = ''
    user_modifiable: bool = False
    group_name: str = ''
    unit_type: UnitType = field(init=False, default=UnitType.UT_UNDEFINED)

    def __post_init__(self):
        """Derive the unit type from the data type."""
        self.unit_type = get_unit_type(self.data_type)
