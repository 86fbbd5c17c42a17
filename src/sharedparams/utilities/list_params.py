"""sharedparams utility: List the parameters in a shared parameter file.

Each parameter is printed on one line, as tab-separated GUID, name,
data type, group name, and unit type.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from sharedparams.constants import DELIMITER
from sharedparams.utilities.base import _SharedParamsStreamCLI


class ListParametersCLI(_SharedParamsStreamCLI,
                        cli_name='list',
                        help_='list the parameters in a shared '
                              'parameter file'):
    """List the parameters in a shared parameter file."""

    long_name = 'list parameters'

    def add_parser_arguments(self, parser):
        """Add the optional --group argument."""
        super().add_parser_arguments(parser)
        parser.add_argument(
            '-g', '--group',
            help=('Only list parameters belonging to the group with this '
                  'name. Default: list all parameters'),
            )

    def process_document(self, document, args):
        """Return one line of text for each parameter."""
        parameters = (document.parameters if args.group is None
                      else document.parameters_in_group(args.group))
        if args.group is not None and not parameters:
            self.get_logger().warning(
                f'No parameters found in group {args.group!r}.'
                )
        return ''.join(self._format_parameter(p) + '\n' for p in parameters)

    @staticmethod
    def _format_parameter(parameter):
        """Return a line of text describing `parameter`."""
        return DELIMITER.join((parameter.guid,
                               parameter.name,
                               str(parameter.data_type),
                               parameter.group_name,
                               str(parameter.unit_type)))


if __name__ == '__main__':
    ListParametersCLI.run_as_script()
