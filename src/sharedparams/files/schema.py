"""Module schema of sharedparams.files.

Defines the Column and RecordSchema classes, which describe how the
columns of the table in a section of a shared parameter file map to
the fields of a record, as well as the three schemas for the META,
GROUP, and PARAM sections.

Schemas are immutable and created once at import time. Conversion
between the text of a cell and the value of a field is strict: text
that cannot be converted raises ValueError.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import re
from types import MappingProxyType

from sharedparams.files.sections import Section
from sharedparams.lib.dataclass_utils import frozen
from sharedparams.lib.dataclass_utils import non_init_field
from sharedparams.lib.dataclass_utils import set_frozen_attr
from sharedparams.records import Group
from sharedparams.records import Metadata
from sharedparams.records import Parameter
from sharedparams.units import ParameterType

_INT_RE = re.compile(r'[+-]?\d+', re.ASCII)
_FALSE = frozenset(('0', 'false'))
_TRUE = frozenset(('1', 'true'))
_NO_DEFAULT = object()


def _to_bool(text):
    """Return a bool from `text`, or raise ValueError."""
    lower_text = text.lower()
    if lower_text in _TRUE:
        return True
    if lower_text in _FALSE:
        return False
    raise ValueError(f'Not a boolean: {text!r}')


def _to_int(text):
    """Return an int from `text`, or raise ValueError."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'Not an integer: {text!r}')
    return int(text)


def _to_parameter_type(text):
    """Return a ParameterType from `text`. Unknown types are INVALID."""
    return ParameterType.from_token(text) or ParameterType.INVALID


def _to_str(text):
    """Return `text` unchanged."""
    return text


_FROM_TEXT = {
    bool: _to_bool,
    int: _to_int,
    str: _to_str,
    ParameterType: _to_parameter_type,
    }


@frozen
class Column:
    """A column of the table of a section.

    Attributes
    ----------
    name : str
        The (upper-case) name of the column, as found in the header.
    field : str
        The name of the record attribute that holds the value.
    type_ : type, optional
        The type of the value. One of bool, int, str, ParameterType.
        Default is str.
    optional : bool, optional
        Whether the column may be absent from the header of a file.
        Default is False.
    default : object, optional
        The value used when the column is absent, or when a row
        has no (or an empty) cell for an optional column. Needed
        if `optional`. Default is no default.
    """

    name: str
    field: str
    type_: type = str
    optional: bool = False
    default: object = _NO_DEFAULT

    def __post_init__(self):
        """Check the consistency of the attributes.

        Raises
        ------
        ValueError
            If type_ is not one of the supported types, or if
            this is an optional column without a default.
        """
        if self.type_ not in _FROM_TEXT:
            raise ValueError(f'Unsupported column type {self.type_!r}')
        if self.optional and self.default is _NO_DEFAULT:
            raise ValueError(f'Optional column {self.name!r} needs a default')

    @property
    def has_default(self):
        """Return whether this column has a default value."""
        return self.default is not _NO_DEFAULT

    def from_text(self, text):
        """Return the value of a field from the `text` of a cell.

        Parameters
        ----------
        text : str
            The contents of a cell, without surrounding white spaces.

        Returns
        -------
        value : object
            The value for the field of this column. It is the default
            if `text` is empty for an optional column.

        Raises
        ------
        ValueError
            If `text` cannot be converted to `type_`.
        """
        if not text and self.optional:
            return self.default
        return _FROM_TEXT[self.type_](text)

    def to_text(self, value):
        """Return the text of a cell for a field `value`."""
        if self.type_ is bool:
            return '1' if value else '0'
        if self.type_ is ParameterType:
            return ParameterType(value).value
        return str(value)


@frozen
class RecordSchema:
    """How the columns of a section bind to the fields of a record.

    Attributes
    ----------
    section : Section
        The section whose table is described by this schema.
    record_type : type
        The class of the records, instantiated with one keyword
        argument for each column.
    columns : tuple of Column
        The columns in their canonical order, which is the one
        used when writing files.
    """

    section: Section
    record_type: type
    columns: tuple
    _by_name: dict = non_init_field()

    def __post_init__(self):
        """Store the columns by name."""
        set_frozen_attr(self, '_by_name',
                        {column.name: column for column in self.columns})

    @property
    def header(self):
        """Return the names of all the columns, in canonical order."""
        return tuple(column.name for column in self.columns)

    @property
    def optional_columns(self):
        """Return the names of the columns that may be absent."""
        return frozenset(c.name for c in self.columns if c.optional)

    @property
    def required_columns(self):
        """Return the names of the columns that must be present."""
        return tuple(c.name for c in self.columns if not c.optional)

    def __getitem__(self, column_name):
        """Return the Column with `column_name`."""
        return self._by_name[column_name.upper()]

    def __contains__(self, column_name):
        """Return whether this schema has a `column_name` column."""
        return column_name.upper() in self._by_name

    def __iter__(self):
        """Yield the columns of this schema in canonical order."""
        return iter(self.columns)

    def make_record(self, values):
        """Return a new record from a {field: value} dictionary."""
        return self.record_type(**values)

    def record_to_cells(self, record):
        """Return a tuple of cell texts for a `record`."""
        return tuple(column.to_text(getattr(record, column.field))
                     for column in self.columns)


META_SCHEMA = RecordSchema(
    section=Section.META,
    record_type=Metadata,
    columns=(
        Column('VERSION', 'version', int),
        Column('MINVERSION', 'min_version', int),
        ),
    )
GROUP_SCHEMA = RecordSchema(
    section=Section.GROUPS,
    record_type=Group,
    columns=(
        Column('ID', 'id', int),
        Column('NAME', 'name'),
        ),
    )
PARAM_SCHEMA = RecordSchema(
    section=Section.PARAMS,
    record_type=Parameter,
    columns=(
        Column('GUID', 'guid'),
        Column('NAME', 'name'),
        Column('DATATYPE', 'data_type', ParameterType),
        Column('DATACATEGORY', 'data_category'),
        Column('GROUP', 'group_id', int),
        Column('VISIBLE', 'visible', bool),
        # Older files have neither DESCRIPTION nor USERMODIFIABLE
        Column('DESCRIPTION', 'description', optional=True, default=''),
        Column('USERMODIFIABLE', 'user_modifiable', bool,
               optional=True, default=False),
        ),
    )
SCHEMAS = MappingProxyType({
    schema.section: schema
    for schema in (META_SCHEMA, GROUP_SCHEMA, PARAM_SCHEMA)
    })
