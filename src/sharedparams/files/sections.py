"""Module sections of sharedparams.files.

Defines the Section enumeration and the split_sections function that
cuts the text of a shared parameter file into the bodies of its
sections. A shared parameter file looks like this:

    # This is a Revit shared parameter file.
    # Do not edit manually.
    *META	VERSION	MINVERSION
    META	2	1
    *GROUP	ID	NAME
    GROUP	1	Structural
    *PARAM	GUID	NAME	DATATYPE	...
    PARAM	{...}	RebarSize	LENGTH	...

A section starts with a '*NAME<tab>' marker at the beginning of a line
and extends up to the next marker (or the end of the text). The rest
of the marker line is the header of the table of the section.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from enum import Enum
from io import StringIO
import logging
import re

from sharedparams.constants import DELIMITER
from sharedparams.constants import SECTION_MARKER
from sharedparams.errors import MalformedDocumentError
from sharedparams.lib.string_utils import harvard_commas
from sharedparams.lib.string_utils import is_comment

_LOGGER = logging.getLogger(__name__)
_MARKER_RE = re.compile(
    fr'^{re.escape(SECTION_MARKER)}(?P<section>[A-Z]+){DELIMITER}',
    re.MULTILINE,
    )
_NEWLINES_RE = re.compile(r'\r\n?')


class Section(Enum):
    """The sections of a shared parameter file.

    The value of each member is the name that appears in the marker
    of the section, which is also the tag of each row in it.
    """

    META = 'META'
    GROUPS = 'GROUP'
    PARAMS = 'PARAM'

    def __str__(self):
        """Return the name of this section as it appears in files."""
        return self.value

    @property
    def marker(self):
        """Return the marker that introduces this section."""
        return f'{SECTION_MARKER}{self.value}{DELIMITER}'

    @property
    def tag(self):
        """Return the tag found at the beginning of each row."""
        return self.value


REQUIRED_SECTIONS = tuple(Section)


def normalize_newlines(text):
    """Return a version of `text` with only '\\n' line terminators."""
    return _NEWLINES_RE.sub('\n', text)


def strip_comment_lines(text):
    """Return `text` without lines that are comments.

    Lines end at '\\n' only. Other Unicode line boundaries (e.g.,
    form feeds or U+2028) may be part of the value of a cell.
    """
    return ''.join(line for line in StringIO(text) if not is_comment(line))


def split_sections(text, logger=None):
    """Return the bodies of the sections in `text`.

    Parameters
    ----------
    text : str
        The full contents of a shared parameter file.
    logger : logging.Logger, optional
        Where to report non-fatal anomalies, like unknown sections.
        If not given, the logger of this module is used.

    Returns
    -------
    sections : dict
        Keys are Section members, values are the text of the section
        bodies, i.e., everything after the marker of each section up
        to the next one. Only the known sections are included. The
        order is the one in `text`.

    Raises
    ------
    MalformedDocumentError
        If `text` contains fewer than three sections, if any of the
        known ones is missing, or if a section appears more than once.
    """
    logger = logger or _LOGGER
    text = strip_comment_lines(normalize_newlines(text))

    # With one capturing group, re.split returns [before_first_marker,
    # name_1, body_1, name_2, body_2, ...]: each name is followed
    # by the body it introduces.
    preamble, *fragments = _MARKER_RE.split(text)
    if preamble.strip():
        logger.warning('Ignoring text before the first section: '
                       f'{preamble.strip()!r}')
    names, bodies = fragments[::2], fragments[1::2]
    if len(names) < len(REQUIRED_SECTIONS):
        raise MalformedDocumentError(
            'Not a shared parameter file: found only '
            f'{len(names)} section(s) {names}. Expected at least '
            f'{harvard_commas(*REQUIRED_SECTIONS)}.'
            )

    sections = {}
    seen = set()
    for name, body in zip(names, bodies):
        if name in seen:
            raise MalformedDocumentError(f'Section {name!r} appears twice.')
        seen.add(name)
        try:
            section = Section(name)
        except ValueError:
            logger.warning(f'Ignoring unknown section {name!r}.')
            continue
        sections[section] = body

    missing = [s for s in REQUIRED_SECTIONS if s not in sections]
    if missing:
        raise MalformedDocumentError(
            'Not a shared parameter file: missing section(s) '
            f'{harvard_commas(*missing)}.'
            )
    return sections
