"""Functions for reading and writing shared parameter files.

A shared parameter file is a tab-separated text file made of three
sections (META, GROUP, and PARAM), each containing a table. See the
.sections module for an example. Revit writes these files in UTF-16
with a byte-order mark. Files edited by hand are usually UTF-8. Both
are understood when reading.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import codecs
from io import TextIOBase
import logging
from pathlib import Path

from sharedparams.constants import FILE_SUFFIX
from sharedparams.constants import MAX_INPUT_SIZE
from sharedparams.constants import PREAMBLE
from sharedparams.document import assemble
from sharedparams.errors import InvalidArgumentError
from sharedparams.errors import NotFoundError
from sharedparams.files.schema import SCHEMAS
from sharedparams.files.sections import Section
from sharedparams.files.sections import split_sections
from sharedparams.files.table import read_records
from sharedparams.files.table import render_section
from sharedparams.records import Metadata

_LOGGER = logging.getLogger(__name__)
_UTF16_BOMS = (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)


def read(filename, logger=None):
    """Return a SharedParameterFile with the contents of a file.

    Parameters
    ----------
    filename : str or Path or TextIOBase
        The file to read from. May be an (open) text stream.
    logger : logging.Logger, optional
        Where to report non-fatal anomalies. If not given, the
        logger of this module is used.

    Returns
    -------
    document : SharedParameterFile
        The contents of the file.

    Raises
    ------
    InvalidArgumentError
        If `filename` is None or empty, if it does not have
        a '.txt' suffix, or if the file is too large.
    NotFoundError
        If `filename` is not the path to an existing file.
    MalformedDocumentError
        If the contents of the file are not a valid shared
        parameter file.
    """
    if isinstance(filename, TextIOBase):
        if filename.closed:
            raise ValueError('I/O operation on closed stream.')
        return from_text(filename.read(MAX_INPUT_SIZE + 1), logger=logger)

    path = _check_path(filename)
    if path.stat().st_size > MAX_INPUT_SIZE:
        raise InvalidArgumentError(
            f'File {path} is too large to be a shared parameter file.'
            )
    return from_text(decode(path.read_bytes()), logger=logger)


def from_text(text, logger=None):
    """Return a SharedParameterFile from the contents of a file.

    Parameters
    ----------
    text : str
        The whole contents of a shared parameter file.
    logger : logging.Logger, optional
        Where to report non-fatal anomalies. If not given, the
        logger of this module is used.

    Returns
    -------
    document : SharedParameterFile
        The contents of `text`, with group names and unit types
        of all parameters resolved.

    Raises
    ------
    InvalidArgumentError
        If `text` is None, empty, only white space, or too long.
    MalformedDocumentError
        If `text` is not a valid shared parameter file. This is
        a SchemaViolationError if a required column is missing,
        and a FieldTypeError if a value cannot be interpreted.
    """
    logger = logger or _LOGGER
    if text is None or not text.strip():
        raise InvalidArgumentError('No shared parameter file contents.')
    if len(text) > MAX_INPUT_SIZE:
        raise InvalidArgumentError(
            'Text is too long to be a shared parameter file: '
            f'{len(text)} characters, maximum is {MAX_INPUT_SIZE}.'
            )
    bodies = split_sections(text, logger=logger)
    records = {
        section: read_records(body, SCHEMAS[section], logger=logger)
        for section, body in bodies.items()
        }
    metadata = _pick_metadata(records[Section.META], logger)
    return assemble(metadata,
                    records[Section.GROUPS],
                    records[Section.PARAMS])


def to_text(document, logger=None):
    """Return the text of a shared parameter file for `document`.

    All sections contain all the known columns, including those
    missing in older versions of the format.

    Parameters
    ----------
    document : SharedParameterFile
        The document to render.
    logger : logging.Logger, optional
        Where to report non-fatal anomalies. If not given, the
        logger of this module is used.

    Returns
    -------
    text : str
        The contents of the file, with '\\n' line terminators.
    """
    logger = logger or _LOGGER
    records = {
        Section.META: (document.metadata,),
        Section.GROUPS: document.groups,
        Section.PARAMS: document.parameters,
        }
    preamble = ''.join(f'{line}\n' for line in PREAMBLE)
    # No blank line between sections, as in files written by Revit
    return preamble + ''.join(
        render_section(SCHEMAS[section], section_records, logger=logger)
        for section, section_records in records.items()
        )


def write(document, filename, newline=None, encoding='utf-8'):
    """Write `document` to a shared parameter file.

    Parameters
    ----------
    document : SharedParameterFile
        The document to write.
    filename : str or Path or TextIOBase
        The file(name) to write to. May be an open text stream.
    newline : str or None, optional
        The line terminator used in the file. If None, the
        default line terminator of the system is used when writing
        to a file, and '\\n' when writing to a stream. Default is None.
    encoding : str, optional
        The encoding of the file. Not used when writing to a stream.
        Default is 'utf-8'.

    Raises
    ------
    OSError
        If writing to filename fails.
    """
    text = to_text(document)
    if isinstance(filename, TextIOBase):
        if filename.closed:
            raise ValueError('I/O operation on closed stream')
        if newline:
            text = text.replace('\n', newline)
        filename.write(text)
        return

    try:
        with Path(filename).open('w', encoding=encoding,
                                 newline=newline) as file:
            file.write(text)
    except OSError:
        _LOGGER.error(f'Failed to write {filename}')
        raise
    _LOGGER.debug(f'Wrote to {filename} successfully')


def decode(raw_contents):
    """Return the text in the `raw_contents` bytes of a file.

    Parameters
    ----------
    raw_contents : bytes
        The contents of a shared parameter file.

    Returns
    -------
    text : str
        The decoded text, without byte-order mark. UTF-16 is
        used if `raw_contents` starts with a UTF-16 byte-order
        mark, UTF-8 otherwise.

    Raises
    ------
    UnicodeDecodeError
        If `raw_contents` cannot be decoded.
    """
    if raw_contents.startswith(_UTF16_BOMS):
        return raw_contents.decode('utf-16')
    return raw_contents.decode('utf-8-sig')


def _check_path(filename):
    """Return a Path from `filename`, if it is a shared parameter file.

    Parameters
    ----------
    filename : str or Path
        The path to check.

    Returns
    -------
    path : Path
        The path to an existing file.

    Raises
    ------
    InvalidArgumentError
        If `filename` is None or empty, or if it does not
        have a '.txt' suffix.
    NotFoundError
        If no file exists at `filename`.
    """
    if filename is None or not str(filename).strip():
        raise InvalidArgumentError('No path to a shared parameter file.')
    path = Path(filename)
    if path.suffix.lower() != FILE_SUFFIX:
        raise InvalidArgumentError(
            f'Invalid shared parameter file {str(filename)!r}. '
            f'Expected a {FILE_SUFFIX!r} file.'
            )
    if not path.is_file():
        _LOGGER.error('Shared parameter file not found.')
        raise NotFoundError(filename)
    return path


def _pick_metadata(records, logger):
    """Return the one Metadata from the `records` of the META section."""
    if not records:
        logger.warning(f'No data in section {Section.META}. Using '
                       f'default version information {Metadata()}.')
        return Metadata()
    if len(records) > 1:
        logger.warning(f'Found {len(records)} rows in section '
                       f'{Section.META}. Using only the first one.')
    return records[0]
