## run.py
# Tokenize raw protocol lines.
import json
import logging
import sys

from tmiline import parsing
from . import _args

logger = logging.getLogger(__name__)


def format_message(message):
    """ Render a tokenized message on a single line. """
    return '{prefix}{command} {params!r} {tags!r}'.format(
        prefix='<{}> '.format(message.prefix) if message.prefix is not None else '',
        command=message.command, params=list(message.params), tags=message.tags)


def dump_message(message):
    """ Render a tokenized message as a JSON object. """
    return json.dumps({
        'tags': message.tags,
        'prefix': message.prefix,
        'command': message.command,
        'params': list(message.params)
    }, ensure_ascii=False)


def main(argv=None):
    parser = _args.parser_for('tmiline', description='Tokenize raw chat protocol lines from files or stdin.')
    parser.add_argument('files', help='Files to read lines from. (default: stdin)', nargs='*', metavar='FILE')
    output = parser.add_argument_group('Output')
    output.add_argument('-j', '--json', help='Dump every message as a JSON object.', action='store_true', default=False)
    output.add_argument('-s', '--strict', help='Exit with an error status if any line is malformed. Blank lines are ignored, not counted as malformed.', action='store_true', default=False)
    args = parser.parse_args(argv)
    _args.setup_logging(args)

    render = dump_message if args.json else format_message
    malformed = 0

    for number, line in enumerate(_args.read_lines(args.files, encoding=args.encoding), start=1):
        if not line:
            continue

        logger.debug('<< %s', line)
        result = parsing.tokenize(line)
        if isinstance(result, parsing.Malformed):
            malformed += 1
            logger.warning('Skipping malformed line %d (%s): %r', number, result.reason, result.raw)
            continue

        print(render(result))

    if malformed:
        logger.warning('%d malformed line(s) skipped.', malformed)
    if args.strict and malformed:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
