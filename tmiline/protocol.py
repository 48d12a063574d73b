## protocol.py
# TMI protocol constants and errors.
import re

DEFAULT_ENCODING = 'utf-8'
FALLBACK_ENCODING = 'iso-8859-1'


## Errors.

class Error(Exception):
    """ Base class for all tmiline errors. """
    pass


class ProtocolViolation(Error):
    """ An error that occurred while constructing a message that violates the protocol. """
    def __init__(self, msg, message):
        super().__init__(msg)
        self.irc_message = message


## Limits.

# Longest payload the chat service accepts in a single PRIVMSG.
MESSAGE_LENGTH_LIMIT = 500


## Message parsing.

LINE_SEPARATOR = '\r\n'
MINIMAL_LINE_SEPARATOR = '\n'

FORBIDDEN_CHARACTERS = { '\r', '\n', '\0' }
ARGUMENT_SEPARATOR = ' '
TRAILING_PREFIX = ':'
SOURCE_PREFIX = ':'
USER_SEPARATOR = '!'
HOST_SEPARATOR = '@'

TAG_INDICATOR = '@'
TAG_SEPARATOR = ';'
TAG_VALUE_SEPARATOR = '='
# Value stored for tags that carry no non-empty value.
TAG_FLAG = True

BADGE_SEPARATOR = ','
BADGE_LEVEL_SEPARATOR = '/'
BADGE_LEVEL_PATTERN = re.compile(r'\s*([+-]?[0-9]+)', re.ASCII)

CHANNEL_PREFIX = '#'


## Misc.

def strip_line_separator(line):
    """ Remove a single trailing line separator, if any. """
    if line.endswith(LINE_SEPARATOR):
        return line[:-len(LINE_SEPARATOR)]
    elif line.endswith(MINIMAL_LINE_SEPARATOR):
        return line[:-len(MINIMAL_LINE_SEPARATOR)]
    return line


def decode(data, encoding=DEFAULT_ENCODING):
    """ Decode raw line data, trying our fallback encoding when the given one fails. """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        return data.decode(FALLBACK_ENCODING)
