"""sharedparams utility: Summarize the contents of a shared parameter file."""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from sharedparams.utilities.base import _SharedParamsStreamCLI


class InfoCLI(_SharedParamsStreamCLI,
              cli_name='info',
              help_='summarize the contents of a shared parameter file'):
    """Print version information and counts of records."""

    long_name = 'info'

    def process_document(self, document, args):
        """Return a summary of document."""
        dangling = document.dangling_parameters
        lines = (
            f'Version: {document.metadata.version}',
            f'Minimum version: {document.metadata.min_version}',
            f'Groups: {len(document.groups)}',
            f'Parameters: {len(document.parameters)}',
            f'Parameters without a group: {len(dangling)}',
            )
        for parameter in dangling:
            self.get_logger().debug(
                f'Parameter {parameter.name!r} refers to group '
                f'{parameter.group_id}, which does not exist.'
                )
        return ''.join(f'{line}\n' for line in lines)


if __name__ == '__main__':
    InfoCLI.run_as_script()
