"""Module string_utils of sharedparams.lib.

Collects functions useful for manipulating strings.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from sharedparams.constants import COMMENT_CHAR


def harvard_commas(*items, sep='and'):
    """Return a Harvard-comma-separated string of the items in `sequence`."""
    if len(items) > 2:  # pylint: disable=magic-value-comparison
        commas = ', '.join(str(i) for i in items[:-1])
        return commas + f', {sep} {items[-1]}'
    return f' {sep} '.join(str(i) for i in items)


def is_comment(line):
    """Return whether `line` is a full-line comment."""
    return line.startswith(COMMENT_CHAR)


def normalize_guid(guid):
    """Return a lower-case version of `guid` without enclosing braces."""
    return str(guid).strip().strip('{}').lower()
