"""Module table of sharedparams.files.

Defines functions and classes for reading the tab-separated table in
the body of a section into records, and for rendering records back
into the text of a section. The binding between columns and record
fields is defined by the RecordSchema objects of the .schema module.

The body of a section, as returned by sections.split_sections, looks
like this (the marker '*PARAM<tab>' was already removed):

    GUID	NAME	DATATYPE	...      <- header
    PARAM	{...}	RebarSize	LENGTH	...  <- tagged data rows
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import csv
from io import StringIO
import logging

from sharedparams.constants import DELIMITER
from sharedparams.constants import SECTION_MARKER
from sharedparams.errors import FieldTypeError
from sharedparams.errors import SchemaViolationError
from sharedparams.files.input_reader import InputStreamReader
from sharedparams.files.input_reader import ShouldSkipLineError
from sharedparams.lib.string_utils import is_comment
from sharedparams.units import ParameterType

_LOGGER = logging.getLogger(__name__)
_FORBIDDEN_IN_CELLS = str.maketrans({DELIMITER: ' ', '\n': ' ', '\r': ' '})


# pylint: disable-next=too-few-public-methods  # Only a namespace
class SharedParameterDialect(csv.Dialect):
    """The csv dialect of the tables in shared parameter files."""

    delimiter = DELIMITER
    quoting = csv.QUOTE_NONE
    quotechar = None
    escapechar = None
    doublequote = False
    skipinitialspace = False
    lineterminator = '\n'
    strict = False


def split_cells(line):
    """Return the white-space-stripped cells in a `line` of a table.

    Cells are never quoted, and may be as long as the whole line.
    """
    line = line.rstrip('\r\n')
    if not line:
        return []
    return [cell.strip() for cell in line.split(DELIMITER)]


class SectionTableReader(InputStreamReader):
    """A reader that iterates the records of the table of a section."""

    def __init__(self, source, schema, noisy=True, logger=None):
        """Initialize instance.

        Parameters
        ----------
        source : TextIOBase
            The stream containing the body of a section.
        schema : RecordSchema
            How the columns of the table bind to the records.
        noisy : bool, optional
            Whether the reader will emit logging messages for lines
            that are skipped. Default is True.
        logger : logging.Logger, optional
            Where to report non-fatal anomalies. If not given, the
            logger of this module is used.

        Raises
        ------
        TypeError
            If `source` is not a TextIOBase instance.
        """
        super().__init__(source, noisy=noisy, logger=logger or _LOGGER)
        self.schema = schema
        self._positions = None  # {Column: index or None}
        self._n_header_cells = 0

    @property
    def section(self):
        """Return the Section this reader is reading."""
        return self.schema.section

    def __next__(self):
        """Return the next record of the table."""
        if self._positions is None:
            self._positions = self._read_header()
        return super().__next__()

    def read(self):
        """Return a list of all the records in the table."""
        return list(self)

    def _read_header(self):
        """Return the position of each column of the schema in the header.

        Returns
        -------
        positions : dict
            Keys are the Column objects of self.schema, values are the
            index of the corresponding cell in each row. Values are
            None for optional columns missing from the header.

        Raises
        ------
        SchemaViolationError
            If a column that is not optional is missing.
        """
        header = []
        for line in self.stream:
            self._current_line += 1
            if line.strip() and not is_comment(line):
                header = [cell.upper() for cell in split_cells(line)]
                break
        self._n_header_cells = len(header)

        positions = {}
        for column in self.schema:
            try:
                positions[column] = header.index(column.name)
            except ValueError:
                if not column.optional:
                    raise SchemaViolationError(str(self.section),
                                               column.name) from None
                self.logger.debug(f'Section {self.section}: no {column.name} '
                                  'column. Using default value '
                                  f'{column.default!r}.')
                positions[column] = None

        unknown = [name for name in header if name not in self.schema]
        if unknown:
            self.logger.debug(f'Section {self.section}: ignoring unknown '
                              f'column(s) {unknown}.')
        return positions

    def _read_one_line(self, line):
        """Return a record from one tagged row of the table."""
        if not line.strip():
            raise ShouldSkipLineError('empty')
        if is_comment(line):
            raise ShouldSkipLineError('comment')
        tag, *cells = split_cells(line)
        if tag != self.section.tag:
            self.logger.warning(
                f'Section {self.section}: skipping line {self._current_line} '
                f'with unexpected tag {tag!r}. Expected {self.section.tag!r}.'
                )
            raise ShouldSkipLineError('wrong tag')
        if len(cells) > self._n_header_cells:
            self.logger.debug(f'Section {self.section}: ignoring '
                              f'{len(cells) - self._n_header_cells} extra '
                              f'cell(s) at line {self._current_line}.')
        values = {column.field: self._read_cell(column, position, cells)
                  for column, position in self._positions.items()}
        return self.schema.make_record(values)

    def _read_cell(self, column, position, cells):
        """Return the value for `column` from the `cells` of a row."""
        if position is None:  # Column not in the header
            return column.default
        try:
            text = cells[position]
        except IndexError:  # Row too short
            if column.optional:
                return column.default
            raise FieldTypeError(str(self.section), self._current_line,
                                 column.name, None) from None
        try:
            value = column.from_text(text)
        except ValueError:
            raise FieldTypeError(str(self.section), self._current_line,
                                 column.name, text) from None
        if value is ParameterType.INVALID and text.upper() != value.value:
            self.logger.warning(
                f'Section {self.section}: unknown {column.name} {text!r} '
                f'at line {self._current_line}. Using {value.value}.'
                )
        return value


def read_records(body, schema, logger=None):
    """Return a list of records from the `body` of a section.

    Parameters
    ----------
    body : str
        The text of a section, without the marker. The first
        meaningful line is the header of the table.
    schema : RecordSchema
        How the columns of the table bind to the records.
    logger : logging.Logger, optional
        Where to report non-fatal anomalies. If not given, the
        logger of this module is used.

    Returns
    -------
    records : list
        One record of type schema.record_type for each data row,
        in the order they appear in `body`.

    Raises
    ------
    SchemaViolationError
        If a required column is missing from the header.
    FieldTypeError
        If any cell cannot be converted to the type of its column.
    """
    return SectionTableReader(StringIO(body), schema, logger=logger).read()


def render_section(schema, records, logger=None):
    """Return the text of a section, marker included, for `records`.

    All the columns of `schema` are written, including the optional
    ones. Each line of the returned text is tagged with the name of
    the section, and terminated by a newline. The header line also
    carries the section marker.

    Parameters
    ----------
    schema : RecordSchema
        How the fields of the records bind to the columns.
    records : Iterable
        The records to be rendered, in order.
    logger : logging.Logger, optional
        Where to report non-fatal anomalies. If not given, the
        logger of this module is used.

    Returns
    -------
    text : str
        The rendered section.
    """
    logger = logger or _LOGGER
    table = StringIO()
    writer = csv.writer(table, dialect=SharedParameterDialect)
    writer.writerow(schema.header)
    for record in records:
        cells = schema.record_to_cells(record)
        clean_cells = tuple(c.translate(_FORBIDDEN_IN_CELLS) for c in cells)
        if clean_cells != cells:
            logger.warning(f'Section {schema.section}: replaced tabs and/or '
                           f'line breaks with spaces in {cells}.')
        writer.writerow(clean_cells)

    tag = schema.section.tag
    *rows, _ = table.getvalue().split('\n')  # Last one is empty
    lines = (f'{tag}{DELIMITER}{row}\n' for row in rows)
    return SECTION_MARKER + ''.join(lines)
