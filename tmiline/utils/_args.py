## _args.py
# Common argument parsing code.
import argparse
import logging
import sys

import tmiline
from tmiline import protocol


def parser_for(name, description):
    """ Create an argument parser with the options every tool shares. """
    parser = argparse.ArgumentParser(name, description=description, add_help=False,
        epilog='This program is part of {package}.'.format(package=tmiline.__name__))

    meta = parser.add_argument_group('Meta')
    meta.add_argument('-h', '--help', action='help', help='What you are reading right now.')
    meta.add_argument('-v', '--version', action='version', version='{package}/%(prog)s {ver}'.format(package=tmiline.__name__, ver=tmiline.__version__), help='Dump version number.')
    meta.add_argument('-V', '--verbose', help='Be verbose in warnings and errors.', action='store_true', default=False)
    meta.add_argument('-d', '--debug', help='Show debug output.', action='store_true', default=False)

    reading = parser.add_argument_group('Input')
    reading.add_argument('-e', '--encoding', help='Input encoding. Undecodable lines fall back to {}. (default: UTF-8)'.format(protocol.FALLBACK_ENCODING.upper()), default=protocol.DEFAULT_ENCODING, metavar='ENCODING')

    return parser


def setup_logging(args):
    """ Set log level from parsed arguments. """
    if args.debug:
        log_level = logging.DEBUG
    elif args.verbose:
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    logging.basicConfig(level=log_level, format='!! %(levelname)s: %(message)s')


def read_lines(files, encoding=protocol.DEFAULT_ENCODING):
    """ Yield decoded lines without line separators from the given files, or stdin if there are none. """
    if not files:
        for line in sys.stdin.buffer:
            yield protocol.strip_line_separator(protocol.decode(line, encoding))
        return

    for file in files:
        with open(file, 'rb') as f:
            for line in f:
                yield protocol.strip_line_separator(protocol.decode(line, encoding))
