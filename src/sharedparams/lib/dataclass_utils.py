"""Module dataclass_utils of sharedparams.lib.

Helpers for frozen dataclasses that cache values computed from
their fields, like the column lookup of a RecordSchema.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from dataclasses import dataclass
from dataclasses import field as data_field
from dataclasses import fields as data_fields
from dataclasses import is_dataclass
import functools
import sys

if sys.version_info < (3, 12):  # No frozen_default keyword in py3.11
    from typing_extensions import dataclass_transform
else:
    from typing import dataclass_transform


# Type checkers treat classes decorated with @frozen as frozen
frozen = dataclass_transform(frozen_default=True)(
    functools.partial(dataclass, frozen=True)
    )


def non_init_field(**kwargs):
    """Return a field that is computed rather than given to __init__.

    The field is left out of repr and comparisons unless `kwargs`
    say otherwise. It defaults to None if neither a default nor a
    default_factory is given.
    """
    if 'default_factory' not in kwargs:
        kwargs.setdefault('default', None)
    return data_field(**{'repr': False, 'compare': False, **kwargs},
                      init=False)


def set_frozen_attr(self, attr_name, attr_value):
    """Store `attr_value` in field `attr_name`, also if `self` is frozen.

    Meant for use in __post_init__ of a frozen dataclass only.

    Raises
    ------
    TypeError
        If `self` is not a dataclass.
    AttributeError
        If `self` has no field called `attr_name`.
    """
    if not is_dataclass(self):
        raise TypeError(f'{type(self).__name__} is not a dataclass')
    if not any(f.name == attr_name for f in data_fields(self)):
        raise AttributeError(
            f'{type(self).__name__} has no field {attr_name!r}'
            )
    object.__setattr__(self, attr_name, attr_value)
