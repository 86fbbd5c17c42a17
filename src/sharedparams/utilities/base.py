"""Module base of sharedparams.utilities.

Defines base CLI classes and functions useful to limit code
repetition in sharedparams utilities.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from abc import ABC
from abc import abstractmethod
import logging
import sys

from sharedparams.cli_base import SharedParamsCLI
from sharedparams.cli_base import StreamArgument
from sharedparams.errors import SharedParameterFileError
from sharedparams.files import shared_parameters
from sharedparams.lib.log_utils import debug_or_lower
from sharedparams.lib.log_utils import prepare_cli_logger


EXIT_ERROR = 2
PACKAGE_LOGGER = 'sharedparams'  # Messages of all modules end up here


class _SharedParamsStreamCLI(SharedParamsCLI, ABC):
    """A utility that reads a shared parameter file and writes text."""

    long_name = ''

    def __call__(self, args=None):
        """Call this utility.

        Parameters
        ----------
        args : Sequence or argparse.Namespace or None, optional
            The command-line arguments. Default is None,
            i.e., use sys.argv.

        Returns
        -------
        exit_code : int
            Zero on success, EXIT_ERROR if reading or
            writing the shared parameter file failed.
        """
        logger = self.get_logger()
        parsed_args = self.parse_cli_args(args)
        prepare_cli_logger(logging.getLogger(PACKAGE_LOGGER),
                           verbose=parsed_args.verbose)
        logger.debug(f'sharedparams utility: {self.long_name}')
        try:  # pylint: disable=too-many-try-statements
            document = self.read_document(parsed_args)
            output = self.process_document(document, parsed_args)
            self.write_output(output, parsed_args)
        except (SharedParameterFileError, OSError, UnicodeError) as exc:
            logger.error(f'{type(exc).__name__}: {exc}',
                         exc_info=debug_or_lower(logger))
            return EXIT_ERROR
        return 0

    def add_infile_argument(self, parser):
        """Add an optional --infile/-i argument to parser.

        Parameters
        ----------
        parser : argparse.ArgumentParser
            The parser to which the optional argument should be
            added. The added argument defaults to the standard-in
            stream, i.e., the terminal.

        Returns
        -------
        None.
        """
        help_ = ('Name of the shared parameter input file. Default: read '
                 'text from the standard-input stream (i.e., the terminal)')
        stream = StreamArgument('r')
        parser.add_argument('--infile', '-i',
                            type=stream,
                            help=help_,
                            default=stream(sys.stdin))

    def add_outfile_argument(self, parser):
        """Add an optional --outfile/-o argument to parser.

        Parameters
        ----------
        parser : argparse.ArgumentParser
            The parser to which the optional argument should be
            added. The added argument defaults to the standard-out
            stream, i.e., the terminal.

        Returns
        -------
        None.
        """
        help_ = ('Name of the output file. Default: write text to the '
                 'standard-output stream (i.e., the terminal)')
        stream = StreamArgument('w')
        parser.add_argument('--outfile', '-o',
                            type=stream,
                            help=help_,
                            default=stream(sys.stdout))

    def add_parser_arguments(self, parser):
        """Add generic arguments to this CLI.

        The base implementation adds:
        - all the arguments of ancestor classes.
        - two optional arguments for the input and output files
          (--infile/-i and --outfile/-o, respectively) which
          default to standard-in and standard-out.
        - an optional argument to turn logging verbose.

        Parameters
        ----------
        parser : argparse.ArgumentParser
            The parser to which arguments are added.

        Returns
        -------
        None.
        """
        super().add_parser_arguments(parser)
        self.add_infile_argument(parser)
        self.add_outfile_argument(parser)
        self.add_verbose_option(parser)

    @abstractmethod
    def process_document(self, document, args):
        """Return the text to be written for `document`.

        Parameters
        ----------
        document : SharedParameterFile
            The file that was read from --infile.
        args : argparse.Namespace
            The parsed command-line arguments.

        Returns
        -------
        output : str
            The text to be written to --outfile.
        """

    def read_document(self, args):
        """Return a SharedParameterFile from args.infile.

        Files are read directly from their path, so that their
        encoding is detected. The terminal is read as text.

        Parameters
        ----------
        args : argparse.Namespace
            The processed CLI arguments.

        Returns
        -------
        document : SharedParameterFile
            The contents of args.infile.
        """
        logger = self.get_logger()
        if args.infile.path is not None:
            return shared_parameters.read(args.infile.path, logger=logger)
        if args.infile.is_interactive:
            sys.stderr.write('Please input the contents of a shared '
                             'parameter file (end with Ctrl+D):\n')
        with args.infile as infile:
            return shared_parameters.read(infile, logger=logger)

    def write_output(self, output, args):
        """Write `output` text to args.outfile."""
        with args.outfile as outfile:
            outfile.write(output)
