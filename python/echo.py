#!/usr/bin/env python3
"""
Name: echo
Description: echo arguments
Author: Randy Yarger, randy.yarger@nextel.com (Original Perl Author)
License: perl

A Python port of the 'echo' utility.

Prints the command line arguments separated by single spaces. A newline is
printed at the end unless the '-n' option is given. At least one TEXT
argument is required.
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

__version__ = "1.3"

PROGRAM_NAME = "echo"


class InvocationError(Exception):
    """Base class for failures that end the run with a non-zero status."""
    status = 1


class UsageError(InvocationError):
    """The command line does not match what echo accepts."""
    status = 2


class RetrievalError(InvocationError):
    """A value that parsing validated could not be read back."""
    status = 1


@dataclass(frozen=True)
class Invocation:
    text: Tuple[str, ...]
    omit_newline: bool = False


class EchoArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting on bad input."""

    def error(self, message):
        raise UsageError(message)


def build_parser(text_nargs='+') -> EchoArgumentParser:
    """
    Describes the accepted command line.

    text_nargs is relaxed to '*' only for parsing the options in front of
    a '--' marker, where the text may all come after the marker.
    """
    parser = EchoArgumentParser(
        prog=PROGRAM_NAME,
        description="Print the given text, separated by spaces, to standard output.",
        usage="%(prog)s [-n] TEXT [TEXT ...]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '-n', '--omit-newline',
        dest='omit_newline',
        action='store_true',
        help='do not print the trailing newline'
    )
    parser.add_argument(
        'text',
        metavar='TEXT',
        nargs=text_nargs, # Kept in order.
        help='text to print'
    )
    return parser


def parse_args(argv, parser=None) -> argparse.Namespace:
    """
    Matches argv (without the program name) against the parser.

    Options and text may be mixed, so 'echo foo -n bar' is the same as
    'echo -n foo bar'. Everything after the first '--' is text, even when it
    looks like an option. Raises UsageError on a missing TEXT or an unknown
    option; --help and --version exit directly.
    """
    if parser is None:
        parser = build_parser()
    args = list(argv)
    if '--' not in args:
        return parser.parse_intermixed_args(args)

    split = args.index('--')
    head, tail = args[:split], args[split + 1:]
    if not tail:
        return parser.parse_intermixed_args(head)

    # parse_intermixed_args drops '--', so the options ahead of it are parsed
    # on their own and the tail is appended verbatim.
    namespace = build_parser(text_nargs='*').parse_intermixed_args(head)
    namespace.text = list(namespace.text or []) + tail
    return namespace


def extract_invocation(namespace) -> Optional[Invocation]:
    """
    Reads the parsed values back out of the namespace.

    Returns None when no text collection was recorded at all, which the
    caller treats as nothing to print.
    """
    try:
        text = namespace.text
    except AttributeError as e:
        raise RetrievalError("no value recorded for TEXT") from e
    if text is None:
        return None
    return Invocation(tuple(text), bool(getattr(namespace, 'omit_newline', False)))


def format_output(invocation: Invocation) -> str:
    """Joins the tokens with single spaces and adds the line ending."""
    ending = "" if invocation.omit_newline else "\n"
    return " ".join(invocation.text) + ending


def run(argv=None, stdout=None) -> int:
    """Parses argv, writes the echoed line and returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if stdout is None:
        stdout = sys.stdout

    parser = build_parser()
    try:
        invocation = extract_invocation(parse_args(argv, parser))
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return e.status
    except RetrievalError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return e.status

    if invocation is None:
        return 0

    try:
        stdout.write(format_output(invocation))
        stdout.flush()
    except BrokenPipeError:
        # Reader went away (e.g. `echo foo | true`).
        sys.stderr.close()
    return 0


def main():
    """The main entry point for the script."""
    sys.exit(run())

if __name__ == "__main__":
    main()
