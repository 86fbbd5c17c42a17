"""Module document of sharedparams.

Defines the SharedParameterFile class, the in-memory representation
of a whole shared parameter file, and the assemble function that
resolves the cross-references between the records read from the
sections of a file.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import copy

from sharedparams.lib.string_utils import normalize_guid
from sharedparams.records import Metadata
from sharedparams.units import get_unit_type


def assemble(metadata, groups, parameters):
    """Return a SharedParameterFile with derived fields resolved.

    Parameters
    ----------
    metadata : Metadata
        The information from the META section.
    groups : Sequence of Group
        The groups, in file order.
    parameters : Sequence of Parameter
        The parameters, in file order. Their group_name and unit_type
        are set from the data in `groups` and from their data_type.

    Returns
    -------
    document : SharedParameterFile
        The document owning all the records. No record is removed,
        and the order of `groups` and `parameters` is preserved.
    """
    document = SharedParameterFile(metadata, groups, parameters)
    document.update_derived_fields()
    return document


class SharedParameterFile:
    """The contents of a shared parameter file.

    Attributes
    ----------
    metadata : Metadata
        The format information of the file.
    groups : list of Group
        The groups of parameters, in file order.
    parameters : list of Parameter
        The definitions of the parameters, in file order.
    """

    def __init__(self, metadata=None, groups=None, parameters=None):
        """Initialize instance.

        Parameters
        ----------
        metadata : Metadata, optional
            The format information. If not given, a default
            Metadata (version 2, minimum version 1) is used.
        groups : Iterable of Group, optional
            The groups. Default is no group.
        parameters : Iterable of Parameter, optional
            The parameters. Default is no parameter. Their derived
            fields are taken as they are. Use update_derived_fields
            (or assemble) to recompute them.
        """
        self.metadata = metadata if metadata is not None else Metadata()
        self.groups = list(groups or ())
        self.parameters = list(parameters or ())

    @classmethod
    def from_file(cls, filename, logger=None):
        """Return a SharedParameterFile read from `filename`.

        Parameters
        ----------
        filename : str or Path
            Path to a '.txt' shared parameter file.
        logger : logging.Logger, optional
            Where to report non-fatal anomalies.

        Returns
        -------
        document : SharedParameterFile
            The contents of `filename`.

        Raises
        ------
        InvalidArgumentError
            If `filename` is empty or has the wrong suffix.
        NotFoundError
            If `filename` does not exist.
        MalformedDocumentError
            If the contents of `filename` are not understood.
        """
        # pylint: disable-next=import-outside-toplevel  # Circular
        from sharedparams.files import shared_parameters
        return shared_parameters.read(filename, logger=logger)

    @classmethod
    def from_text(cls, text, logger=None):
        """Return a SharedParameterFile from the contents of a file."""
        # pylint: disable-next=import-outside-toplevel  # Circular
        from sharedparams.files import shared_parameters
        return shared_parameters.from_text(text, logger=logger)

    def __eq__(self, other):
        """Return whether this file has the same records as `other`."""
        if not isinstance(other, SharedParameterFile):
            return NotImplemented
        return (self.metadata == other.metadata
                and self.groups == other.groups
                and self.parameters == other.parameters)

    __hash__ = None

    def __repr__(self):
        """Return a representation string of this file."""
        return (f'{type(self).__name__}(metadata={self.metadata!r}, '
                f'{len(self.groups)} groups, '
                f'{len(self.parameters)} parameters)')

    def __str__(self):
        """Return the text of this file."""
        return self.to_text()

    def __deepcopy__(self, memo):
        """Return an independent copy of this file."""
        return type(self)(copy.deepcopy(self.metadata, memo),
                          copy.deepcopy(self.groups, memo),
                          copy.deepcopy(self.parameters, memo))

    def copy(self):
        """Return a deep copy of this file."""
        return copy.deepcopy(self)

    @property
    def dangling_parameters(self):
        """Return the parameters whose group_id matches no group."""
        group_ids = {group.id for group in self.groups}
        return tuple(p for p in self.parameters if p.group_id not in group_ids)

    def get_group(self, group_id):
        """Return the first group with `group_id`, or None."""
        return next((g for g in self.groups if g.id == group_id), None)

    def get_parameter(self, guid):
        """Return the first parameter with `guid`, or None.

        Parameters
        ----------
        guid : str
            The identifier of the parameter. Letter case and
            enclosing curly braces are not relevant.

        Returns
        -------
        parameter : Parameter or None
            The parameter with `guid`, if any.
        """
        guid = normalize_guid(guid)
        return next((p for p in self.parameters
                     if normalize_guid(p.guid) == guid),
                    None)

    def parameters_in_group(self, group_name):
        """Return the parameters whose group_name is `group_name`."""
        return tuple(p for p in self.parameters if p.group_name == group_name)

    def to_text(self, logger=None):
        """Return the contents of this file as a string."""
        # pylint: disable-next=import-outside-toplevel  # Circular
        from sharedparams.files import shared_parameters
        return shared_parameters.to_text(self, logger=logger)

    def update_derived_fields(self):
        """Recompute group_name and unit_type of all parameters.

        group_name is the name of the first group whose id is the
        group_id of the parameter, or an empty string if there is
        no such group. unit_type is derived from the data_type.
        """
        names = {}
        for group in self.groups:
            names.setdefault(group.id, group.name)
        for parameter in self.parameters:
            parameter.group_name = names.get(parameter.group_id, '')
            parameter.unit_type = get_unit_type(parameter.data_type)
