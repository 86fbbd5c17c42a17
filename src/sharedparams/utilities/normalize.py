"""sharedparams utility: Rewrite a shared parameter file in canonical form.

The output contains all the known columns of all sections, in their
canonical order, including those that older versions of the format
do not have. Rows that cannot be understood are dropped with a
warning.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from sharedparams.utilities.base import _SharedParamsStreamCLI


class NormalizeCLI(_SharedParamsStreamCLI,
                   cli_name='normalize',
                   help_='rewrite a shared parameter file in canonical form'):
    """Rewrite a shared parameter file in the complete, canonical format."""

    long_name = 'normalize'

    def process_document(self, document, args):
        """Return the canonical text of document."""
        return document.to_text(logger=self.get_logger())


if __name__ == '__main__':
    NormalizeCLI.run_as_script()
