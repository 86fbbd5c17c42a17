"""Module cli_base of sharedparams.

Defines the base class of the sharedparams commands, and an argparse
type for input and output files that default to the terminal.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

import argparse
import logging
from pathlib import Path
import sys
from types import MappingProxyType

from sharedparams import GLOBALS


_TERMINAL_STREAMS = ('stdin', 'stdout', 'stderr')


class StreamArgument:
    """An argparse type for files that may also be the terminal.

    Calling an instance with a path (or an open stream) returns a
    context manager. Entering the context opens the file at path
    and returns the open file. Open streams are returned unchanged
    and are never closed. This way, default values for arguments
    can be sys.stdin/sys.stdout, and files passed by users are only
    opened (and created, for writing) when actually needed.
    """

    def __init__(self, mode, encoding='utf-8'):
        """Initialize instance.

        Parameters
        ----------
        mode : str
            The mode with which files will be opened.
        encoding : str, optional
            The encoding used for opening files. Default is 'utf-8'.
        """
        self.mode = mode
        self.encoding = encoding

    def __call__(self, path_or_stream):
        """Return a context manager for `path_or_stream`.

        Parameters
        ----------
        path_or_stream : str or Path or TextIOBase
            The path to a file, or an open stream.

        Returns
        -------
        stream : _LazyStream
            A context manager that returns an open
            stream for `path_or_stream` upon entering.

        Raises
        ------
        argparse.ArgumentTypeError
            If `path_or_stream` is neither a path nor a stream.
        """
        if self._is_stream(path_or_stream):
            return _LazyStream(path_or_stream, None, self.mode, self.encoding)
        try:
            path = Path(path_or_stream)
        except TypeError:
            raise argparse.ArgumentTypeError(
                f'Cannot open {path_or_stream!r}. Not a path.'
                ) from None
        return _LazyStream(None, path, self.mode, self.encoding)

    @staticmethod
    def _is_stream(obj):
        """Return whether `obj` looks like an open stream."""
        return not isinstance(obj, (str, Path)) and (
            hasattr(obj, 'read') or hasattr(obj, 'write')
            )


class _LazyStream:
    """A file that is opened only when entering a context."""

    def __init__(self, stream, path, mode, encoding):
        """Initialize instance from either a `stream` or a `path`."""
        self._stream = stream
        self._opened = None
        self.path = path
        self.mode = mode
        self.encoding = encoding

    def __enter__(self):
        """Return an open stream."""
        if self._stream is not None:
            return self._stream
        self._opened = self.path.open(self.mode, encoding=self.encoding)
        return self._opened

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close the file, if we opened it."""
        if self._opened is not None:
            self._opened.close()
            self._opened = None

    def __repr__(self):
        """Return a representation string for this stream."""
        target = self.path if self._stream is None else self._stream
        return f'{type(self).__name__}({target!r}, mode={self.mode!r})'

    @property
    def is_interactive(self):
        """Return whether this stream is an interactive terminal."""
        return self.is_terminal and self._stream.isatty()

    @property
    def is_terminal(self):
        """Return whether this stream is one of the standard streams."""
        return self._stream is not None and any(
            self._stream is getattr(sys, name) for name in _TERMINAL_STREAMS
            )


class SharedParamsCLI:
    """Base class for the sharedparams commands.

    Subclasses pass their command name as the `cli_name` keyword
    argument of the class statement, and a one-line `help_` that is
    shown in the help of the parent command. A command either
    overrides __call__, or lists the classes of its sub-commands in
    `children`. Alternative names of sub-commands go into
    `child_aliases`, keyed by the name of the sub-command.
    """

    children = ()
    child_aliases = MappingProxyType({})
    cli_name = None
    help = None

    def __init_subclass__(cls, *, cli_name=None, help_=None, **kwargs):
        """Set the name and the help text of a new command.

        Parameters
        ----------
        cli_name : str, optional
            The name of the command. If not given, the last
            component of the name of the module that defines
            `cls` is used. Default is None.
        help_ : str, optional
            Short help shown by the parent command. Default is None.
        **kwargs : dict
            Other optional arguments, passed on to type.
        """
        super().__init_subclass__(**kwargs)
        cls.cli_name = cli_name or cls.__module__.rpartition('.')[2]
        cls.help = help_

    def __call__(self, args=None):
        """Run the sub-command selected in `args`.

        Parameters
        ----------
        args : Sequence or argparse.Namespace or None, optional
            The command-line arguments. If None, sys.argv is used.
            Default is None.

        Returns
        -------
        exit_code : int
            Zero if no sub-command was given (help is printed),
            otherwise the exit code of the sub-command.
        """
        parsed_args = self.parse_cli_args(args)
        command = getattr(parsed_args, 'func', None)
        if command is None:
            self.parser.print_help()
            return 0
        return command(parsed_args)

    @property
    def parser(self):
        """Return an ArgumentParser for this command."""
        parser = argparse.ArgumentParser(prog=self.cli_name,
                                         description=self.help)
        self.add_parser_arguments(parser)
        return parser

    @classmethod
    def get_logger(cls):
        """Return the logger of the module that defines `cls`."""
        return logging.getLogger(cls.__module__)

    @classmethod
    def run_as_script(cls):
        """Run this command with sys.argv, then exit the interpreter.

        Used by console scripts and __main__ modules. An interrupt
        from the keyboard gives exit code 1.

        Raises
        ------
        SystemExit
            Always, with the exit code of the command.
        """
        try:
            exit_code = cls()()
        except KeyboardInterrupt:
            print('Terminated by keyboard interrupt', file=sys.stderr)
            exit_code = 1
        sys.exit(exit_code)

    def add_parser_arguments(self, parser):
        """Add --version and one sub-parser per child to `parser`.

        Extend this method in subclasses that have arguments of
        their own, calling super().add_parser_arguments first.
        """
        parser.add_argument('--version',
                            help='print version number',
                            action='version',
                            version=GLOBALS['version_message'])
        if not self.children:
            return
        subparsers = parser.add_subparsers(dest='command')
        for child_cls in self.children:
            child = child_cls()
            child_parser = subparsers.add_parser(
                child.cli_name,
                help=child.help,
                aliases=self.child_aliases.get(child.cli_name, ()),
                )
            child_parser.set_defaults(func=child)
            child.add_parser_arguments(child_parser)

    @staticmethod
    def add_verbose_option(parser):
        """Add --verbose flag to `parser`."""
        parser.add_argument('-v', '--verbose',
                            help='increase output verbosity',
                            action='store_true')

    def parse_cli_args(self, args):
        """Return `args` parsed with this command's parser.

        An argparse.Namespace is returned unchanged, as parent
        commands pass their parsed arguments to their children.
        """
        if isinstance(args, argparse.Namespace):
            return args
        return self.parser.parse_args(args)
