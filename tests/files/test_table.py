"""Tests for module table of sharedparams.files."""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import csv
from io import StringIO
import logging

import pytest
from pytest_cases import parametrize

from sharedparams.constants import LOG_VERY_VERBOSE
from sharedparams.errors import FieldTypeError
from sharedparams.errors import SchemaViolationError
from sharedparams.files.schema import GROUP_SCHEMA
from sharedparams.files.schema import META_SCHEMA
from sharedparams.files.schema import PARAM_SCHEMA
from sharedparams.files.table import SectionTableReader
from sharedparams.files.table import read_records
from sharedparams.files.table import render_section
from sharedparams.files.table import split_cells
from sharedparams.records import Group
from sharedparams.records import Metadata
from sharedparams.records import Parameter
from sharedparams.units import ParameterType

_OLD_PARAM_HEADER = 'GUID\tNAME\tDATATYPE\tDATACATEGORY\tGROUP\tVISIBLE\n'
_NEW_PARAM_HEADER = _OLD_PARAM_HEADER.replace(
    '\n',
    '\tDESCRIPTION\tUSERMODIFIABLE\n'
    )


class TestSplitCells:
    """Tests for the split_cells function."""

    _cells = {
        'simple': ('a\tb\tc\n', ['a', 'b', 'c']),
        'spaces': (' a \t b b\t c\r\n', ['a', 'b b', 'c']),
        'empty cells': ('a\t\t\tb\t\n', ['a', '', '', 'b', '']),
        'quotes': ('"a\tb"\tc\n', ['"a', 'b"', 'c']),
        'form feed': ('a\x0cb\tc\n', ['a\x0cb', 'c']),
        'empty line': ('\n', []),
        }

    @parametrize('line,expect', _cells.values(), ids=_cells)
    def test_split(self, line, expect):
        """Check splitting of a line into cells."""
        assert split_cells(line) == expect


class TestReadRecords:
    """Tests for reading the table of a section into records."""

    def test_groups(self):
        """Check reading of a simple GROUP section."""
        body = 'ID\tNAME\nGROUP\t1\tStructural\nGROUP\t2\tIdentity Data\n'
        groups = read_records(body, GROUP_SCHEMA)
        assert groups == [Group(1, 'Structural'), Group(2, 'Identity Data')]

    def test_column_order_irrelevant(self):
        """Check that columns are bound by name, not by position."""
        body = 'NAME\tID\nGROUP\tStructural\t1\n'
        assert read_records(body, GROUP_SCHEMA) == [Group(1, 'Structural')]

    def test_header_case_insensitive(self):
        """Check that header names are matched regardless of case."""
        body = 'Id\tname\nGROUP\t1\tStructural\n'
        assert read_records(body, GROUP_SCHEMA) == [Group(1, 'Structural')]

    def test_no_rows(self):
        """Check that a section with only a header gives no records."""
        assert not read_records('ID\tNAME\n', GROUP_SCHEMA)

    def test_complete_parameter(self):
        """Check reading of a parameter with all columns."""
        body = (_NEW_PARAM_HEADER
                + 'PARAM\t{a-1}\tWidth\tLENGTH\t\t2\t0\tClear width\t1\n')
        parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter == Parameter(guid='{a-1}',
                                      name='Width',
                                      data_type=ParameterType.LENGTH,
                                      data_category='',
                                      group_id=2,
                                      visible=False,
                                      description='Clear width',
                                      user_modifiable=True)

    def test_long_cell(self):
        """Check that a cell may be longer than the csv field limit."""
        description = 'd' * (csv.field_size_limit() + 1)
        body = (_NEW_PARAM_HEADER
                + f'PARAM\t{{a-1}}\tWidth\tTEXT\t\t2\t1\t{description}\t1\n')
        parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.description == description
        assert parameter.user_modifiable is True

    def test_optional_columns_missing(self):
        """Check defaults for an older PARAM header."""
        body = _OLD_PARAM_HEADER + 'PARAM\t{a-1}\tWidth\tLENGTH\t\t2\t1\n'
        parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.description == ''
        assert parameter.user_modifiable is False

    def test_optional_cells_missing(self):
        """Check defaults for a row shorter than the header."""
        body = _NEW_PARAM_HEADER + 'PARAM\t{a-1}\tWidth\tLENGTH\t\t2\t1\n'
        parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.description == ''
        assert parameter.user_modifiable is False

    def test_optional_cell_empty(self):
        """Check the default for an empty cell of an optional column."""
        body = _NEW_PARAM_HEADER + 'PARAM\t{a-1}\tWidth\tLENGTH\t\t2\t1\t\t\n'
        parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.user_modifiable is False

    def test_skip_blank_and_comments(self, caplog):
        """Check that blank and comment lines are skipped."""
        body = ('\n# before header\nID\tNAME\n\n'
                '# a comment\nGROUP\t1\tA\n   \nGROUP\t2\tB\n')
        with caplog.at_level(LOG_VERY_VERBOSE):
            groups = read_records(body, GROUP_SCHEMA)
        assert groups == [Group(1, 'A'), Group(2, 'B')]
        # pylint: disable-next=magic-value-comparison
        assert sum('Skipping line' in r.getMessage()
                   for r in caplog.records) == 3

    def test_wrong_tag(self, caplog):
        """Check that rows with an unexpected tag are skipped."""
        body = 'ID\tNAME\nPARAM\t1\tA\nGROUP\t2\tB\n'
        with caplog.at_level(logging.WARNING):
            groups = read_records(body, GROUP_SCHEMA)
        assert groups == [Group(2, 'B')]
        # pylint: disable-next=magic-value-comparison
        assert "unexpected tag 'PARAM'" in caplog.text

    def test_extra_cells(self, caplog):
        """Check that cells beyond the header are ignored."""
        body = 'ID\tNAME\nGROUP\t1\tA\tunexpected\n'
        with caplog.at_level(logging.DEBUG):
            groups = read_records(body, GROUP_SCHEMA)
        assert groups == [Group(1, 'A')]
        # pylint: disable-next=magic-value-comparison
        assert 'extra cell' in caplog.text

    def test_unknown_columns(self, caplog):
        """Check that columns that are not in the schema are ignored."""
        body = (_NEW_PARAM_HEADER.replace('\n', '\tHIDEWHENNOVALUE\n')
                + 'PARAM\t{a-1}\tWidth\tLENGTH\t\t2\t1\t\t1\t0\n')
        with caplog.at_level(logging.DEBUG):
            parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.user_modifiable is True
        # pylint: disable-next=magic-value-comparison
        assert 'HIDEWHENNOVALUE' in caplog.text

    def test_unknown_data_type(self, caplog):
        """Check that an unknown DATATYPE gives INVALID and a warning."""
        body = _OLD_PARAM_HEADER + 'PARAM\t{a-1}\tWidth\tLENGHT\t\t2\t1\n'
        with caplog.at_level(logging.WARNING):
            parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.data_type is ParameterType.INVALID
        # pylint: disable-next=magic-value-comparison
        assert "'LENGHT'" in caplog.text

    def test_explicit_invalid_data_type(self, caplog):
        """Check that an INVALID DATATYPE is not reported."""
        body = _OLD_PARAM_HEADER + 'PARAM\t{a-1}\tWidth\tINVALID\t\t2\t1\n'
        with caplog.at_level(logging.WARNING):
            parameter, = read_records(body, PARAM_SCHEMA)
        assert parameter.data_type is ParameterType.INVALID
        assert not caplog.records

    def test_custom_logger(self, caplog):
        """Check that anomalies are reported to the logger given."""
        logger = logging.getLogger('custom_logger_for_table')
        body = 'ID\tNAME\nPARAM\t1\tA\n'
        with caplog.at_level(logging.WARNING):
            read_records(body, GROUP_SCHEMA, logger=logger)
        record, = caplog.records
        assert record.name == logger.name

    _missing_column = {
        'no ID': ('NAME\nGROUP\tA\n', GROUP_SCHEMA, 'ID'),
        'empty body': ('', GROUP_SCHEMA, 'ID'),
        'only comments': ('# nothing here\n', META_SCHEMA, 'VERSION'),
        'no VISIBLE': (_OLD_PARAM_HEADER.replace('\tVISIBLE', ''),
                       PARAM_SCHEMA, 'VISIBLE'),
        }

    @parametrize('body,schema,column',
                 _missing_column.values(),
                 ids=_missing_column)
    def test_missing_required_column(self, body, schema, column):
        """Check complaints when a required column is not in the header."""
        with pytest.raises(SchemaViolationError) as exc_info:
            read_records(body, schema)
        assert exc_info.value.column == column
        assert exc_info.value.section == str(schema.section)

    _invalid_cell = {
        'int': ('ID\tNAME\nGROUP\tone\tA\n', GROUP_SCHEMA, 'ID', 'one', 2),
        'bool': (_OLD_PARAM_HEADER + 'PARAM\t{a}\tW\tTEXT\t\t1\tyes\n',
                 PARAM_SCHEMA, 'VISIBLE', 'yes', 2),
        'line number': ('VERSION\tMINVERSION\n\n# c\nMETA\t2\t1.0\n',
                        META_SCHEMA, 'MINVERSION', '1.0', 4),
        'missing cell': ('VERSION\tMINVERSION\nMETA\t2\n',
                         META_SCHEMA, 'MINVERSION', None, 2),
        }

    @parametrize('body,schema,column,text,line',
                 _invalid_cell.values(),
                 ids=_invalid_cell)
    # pylint: disable-next=too-many-arguments
    def test_invalid_cell(self, body, schema, column, text, line):
        """Check complaints when a cell cannot be interpreted."""
        with pytest.raises(FieldTypeError) as exc_info:
            read_records(body, schema)
        exc = exc_info.value
        assert exc.section == str(schema.section)
        assert exc.column == column
        assert exc.text == text
        assert exc.line == line


class TestSectionTableReader:
    """Tests for the SectionTableReader class."""

    def test_iterate(self):
        """Check that records are produced one at a time."""
        reader = SectionTableReader(StringIO('ID\tNAME\nGROUP\t1\tA\n'),
                                    GROUP_SCHEMA)
        assert next(reader) == Group(1, 'A')
        with pytest.raises(StopIteration):
            next(reader)

    def test_invalid_source(self):
        """Check complaints when the source is not a stream."""
        with pytest.raises(TypeError):
            SectionTableReader('ID\tNAME\n', GROUP_SCHEMA)

    def test_section(self):
        """Check that the section is the one of the schema."""
        reader = SectionTableReader(StringIO(''), META_SCHEMA)
        assert reader.section is META_SCHEMA.section


class TestRenderSection:
    """Tests for the render_section function."""

    def test_meta(self):
        """Check rendering of the META section."""
        text = render_section(META_SCHEMA, (Metadata(),))
        assert text == '*META\tVERSION\tMINVERSION\nMETA\t2\t1\n'

    def test_no_records(self):
        """Check that an empty section only has the marker line."""
        assert render_section(GROUP_SCHEMA, ()) == '*GROUP\tID\tNAME\n'

    def test_parameter(self):
        """Check that all columns are written, optional ones included."""
        parameter = Parameter('{a-1}', 'Width', ParameterType.LENGTH,
                              group_id=2, visible=False)
        text = render_section(PARAM_SCHEMA, (parameter,))
        marker, row = text.splitlines()
        assert marker == '*PARAM\t' + '\t'.join(PARAM_SCHEMA.header)
        assert row == 'PARAM\t{a-1}\tWidth\tLENGTH\t\t2\t0\t\t0'

    def test_derived_fields_not_written(self):
        """Check that group_name and unit_type are not in the output."""
        parameter = Parameter('{a-1}', 'Width', ParameterType.LENGTH,
                              group_name='Dimensions')
        text = render_section(PARAM_SCHEMA, (parameter,))
        # pylint: disable=magic-value-comparison
        assert 'Dimensions' not in text
        assert 'UT_Length' not in text

    _special = {
        'tab': 'first\tsecond',
        'newline': 'first\nsecond',
        'carriage return': 'first\rsecond',
        }

    @parametrize(description=_special.values(), ids=_special)
    def test_special_characters(self, description, caplog):
        """Check that tabs and newlines in values become spaces."""
        parameter = Parameter('{a-1}', 'Width', description=description)
        with caplog.at_level(logging.WARNING):
            text = render_section(PARAM_SCHEMA, (parameter,))
        _, row = text.splitlines()
        # pylint: disable-next=magic-value-comparison
        assert '\tfirst second\t' in row
        assert caplog.records

    def test_round_trip(self):
        """Check that rendered groups are read back unchanged."""
        groups = [Group(1, 'Structural'), Group(-2, 'Identity "Data"')]
        text = render_section(GROUP_SCHEMA, groups)
        body = text.split('\t', maxsplit=1)[1]  # Remove marker
        assert read_records(body, GROUP_SCHEMA) == groups
