"""Module errors of sharedparams.

Defines the base SharedParameterFileError exception and its subclasses.
All of them are raised synchronously to the caller of a load/parse
function. Broken cross-references between sections are never errors.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'


class SharedParameterFileError(Exception):
    """Base class of all errors related to shared parameter files."""


class InvalidArgumentError(SharedParameterFileError, ValueError):
    """Malformed input at the call site (e.g., empty text, bad suffix)."""


class NotFoundError(SharedParameterFileError, FileNotFoundError):
    """The shared parameter file to be read does not exist."""

    def __init__(self, path, message=''):
        """Initialize instance with the path that was not found."""
        self.path = path
        if not message:
            message = f'Shared parameter file {str(path)!r} does not exist.'
        super().__init__(message)


class MalformedDocumentError(SharedParameterFileError, ValueError):
    """The text does not have the structure of a shared parameter file."""


class SchemaViolationError(MalformedDocumentError):
    """A required column is missing from the header of a section."""

    def __init__(self, section, column, message=''):
        """Initialize instance from the section and the missing column."""
        self.section = section
        self.column = column
        if not message:
            message = (f'Section {section!r} lacks required '
                       f'column {column!r} in its header.')
        super().__init__(message)


class FieldTypeError(MalformedDocumentError):
    """The text in a cell cannot be interpreted with its column's type."""

    def __init__(self, section, line, column, text, message=''):
        """Initialize instance with information about the faulty cell.

        Parameters
        ----------
        section : str
            The name of the section in which the cell is.
        line : int
            The number of the line containing the cell. Lines are
            counted from one, starting at the header of `section`.
        column : str
            The name of the column to which the cell belongs.
        text : str or None
            The offending text. None if the row has no cell at all
            for `column`.
        message : str, optional
            A custom message. If not given, one is generated from
            the other arguments.
        """
        self.section = section
        self.line = line
        self.column = column
        self.text = text
        if not message:
            what = (f'Invalid value {text!r}' if text is not None
                    else 'Missing value')
            message = (f'{what} for column {column!r} at line {line} '
                       f'of section {section!r}.')
        super().__init__(message)
