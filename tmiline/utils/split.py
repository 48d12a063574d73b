## split.py
# Split outgoing payloads into sendable lines.
import logging
import sys

from tmiline import protocol, parsing, splitting
from . import _args

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = _args.parser_for('tmiline-split', description='Split long payloads into lines that fit the message length limit.')
    parser.add_argument('texts', help='Payloads to split. (default: one per line from stdin)', nargs='*', metavar='TEXT')
    output = parser.add_argument_group('Output')
    output.add_argument('-l', '--limit', help='Maximum payload length. (default: {})'.format(protocol.MESSAGE_LENGTH_LIMIT), type=int, default=protocol.MESSAGE_LENGTH_LIMIT, metavar='N')
    output.add_argument('-c', '--channel', help='Channel to construct PRIVMSG lines for, instead of printing bare chunks.', metavar='CHANNEL')
    args = parser.parse_args(argv)
    _args.setup_logging(args)

    if args.limit <= 0:
        parser.error('limit must be positive')

    texts = args.texts or _args.read_lines([], encoding=args.encoding)
    status = 0

    for text in texts:
        for chunk in splitting.iter_chunks(text, args.limit):
            logger.debug('Chunk of %d character(s).', len(chunk))
            if not args.channel:
                print(chunk)
                continue

            try:
                print(parsing.build_privmsg(args.channel, chunk))
            except protocol.ProtocolViolation as e:
                logger.error('Cannot send chunk: %s', e)
                status = 1

    return status


if __name__ == '__main__':
    sys.exit(main())
