## parsing.py
# Line tokenizing and message construction.
from . import protocol, channels

__all__ = [ 'UNTERMINATED_TAGS', 'UNTERMINATED_PREFIX', 'MISSING_COMMAND', 'ParsedMessage', 'Malformed',
            'tokenize', 'parse_tags', 'check_tag', 'parse_user', 'build_privmsg' ]


## Malformed line reasons.

UNTERMINATED_TAGS = 'unterminated tag block'
UNTERMINATED_PREFIX = 'unterminated prefix'
MISSING_COMMAND = 'missing command'


class ParsedMessage:
    """
    A single tokenized protocol line.

    `tags` maps tag keys to either a string value or the flag `True`, `prefix` is the message origin (or None),
    `params` is a tuple of positional arguments, the last of which may contain spaces if it was a trailing parameter.
    """
    def __init__(self, command, params=(), prefix=None, tags=None, raw=None):
        self.raw = raw
        self.tags = tags if tags is not None else {}
        self.prefix = prefix
        self.command = command
        self.params = tuple(params)

    @property
    def source(self):
        """ The message origin. Alias of `prefix`. """
        return self.prefix

    def construct(self, force=False):
        """
        Construct a raw protocol line, without line separator.
        If `force` is True, don't check the validity of the result.
        """
        if not self.command and not force:
            raise protocol.ProtocolViolation('The constructed message has no command.', message=self.raw)
        message = str(self.command)

        # Add parameters.
        for idx, param in enumerate(self.params):
            # Trailing parameter?
            if not param or protocol.ARGUMENT_SEPARATOR in param or param.startswith(protocol.TRAILING_PREFIX):
                if idx + 1 < len(self.params) and not force:
                    raise protocol.ProtocolViolation('Only the final parameter of a message can be trailing and thus contain spaces, or start with a colon.', message=param)
                message += ' ' + protocol.TRAILING_PREFIX + param
            # Regular parameter.
            else:
                message += ' ' + param

        # Prepend source.
        if self.prefix is not None:
            message = protocol.SOURCE_PREFIX + self.prefix + ' ' + message

        # Prepend tags.
        if self.tags:
            raw_tags = []
            for tag, value in self.tags.items():
                if not force:
                    check_tag(tag, value)
                if value is protocol.TAG_FLAG:
                    raw_tags.append(tag)
                else:
                    raw_tags.append(tag + protocol.TAG_VALUE_SEPARATOR + value)
            message = protocol.TAG_INDICATOR + protocol.TAG_SEPARATOR.join(raw_tags) + ' ' + message

        # Sanity check for characters.
        if any(ch in message for ch in protocol.FORBIDDEN_CHARACTERS) and not force:
            raise protocol.ProtocolViolation('The constructed message contains forbidden characters ({chs}).'.format(chs=', '.join(sorted(map(repr, protocol.FORBIDDEN_CHARACTERS)))), message=message)

        return message

    def __eq__(self, other):
        if not isinstance(other, ParsedMessage):
            return NotImplemented
        return (self.raw, self.tags, self.prefix, self.command, self.params) == \
               (other.raw, other.tags, other.prefix, other.command, other.params)

    def __repr__(self):
        return '{cls}(command={command!r}, params={params!r}, prefix={prefix!r}, tags={tags!r})'.format(
            cls=self.__class__.__name__, command=self.command, params=self.params, prefix=self.prefix, tags=self.tags)

    def __str__(self):
        return self.construct(force=True)


class Malformed:
    """ Result of tokenizing a line that does not form a message. `reason` is one of the module-level reasons. """
    def __init__(self, raw, reason):
        self.raw = raw
        self.reason = reason

    def __eq__(self, other):
        if not isinstance(other, Malformed):
            return NotImplemented
        return (self.raw, self.reason) == (other.raw, other.reason)

    def __repr__(self):
        return '{cls}({raw!r}, reason={reason!r})'.format(cls=self.__class__.__name__, raw=self.raw, reason=self.reason)


## Parsing.

def _skip_spaces(line, position):
    while line.startswith(protocol.ARGUMENT_SEPARATOR, position):
        position += 1
    return position


def tokenize(line):
    """
    Tokenize given line into a ParsedMessage.
    Returns a Malformed result instead of raising when the line has an unterminated tag block or prefix, or no command.
    """
    tags = {}
    prefix = None
    params = []
    position = 0

    # Tags, delimited from the rest of the message by the first space.
    if line.startswith(protocol.TAG_INDICATOR):
        nextspace = line.find(protocol.ARGUMENT_SEPARATOR)
        if nextspace == -1:
            return Malformed(line, UNTERMINATED_TAGS)

        tags = parse_tags(line[len(protocol.TAG_INDICATOR):nextspace])
        position = nextspace + 1

    position = _skip_spaces(line, position)

    # Source.
    if line.startswith(protocol.SOURCE_PREFIX, position):
        nextspace = line.find(protocol.ARGUMENT_SEPARATOR, position)
        if nextspace == -1:
            return Malformed(line, UNTERMINATED_PREFIX)

        prefix = line[position + len(protocol.SOURCE_PREFIX):nextspace]
        position = _skip_spaces(line, nextspace + 1)

    # Command. Without any more spaces, the rest of the line is the command.
    nextspace = line.find(protocol.ARGUMENT_SEPARATOR, position)
    if nextspace == -1:
        if position < len(line):
            return ParsedMessage(line[position:], prefix=prefix, tags=tags, raw=line)
        return Malformed(line, MISSING_COMMAND)

    command = line[position:nextspace]
    position = _skip_spaces(line, nextspace + 1)

    # Parameters.
    # Format: (word|:sentence)*
    while position < len(line):
        # Trailing parameter: the rest of the line, spaces included.
        if line.startswith(protocol.TRAILING_PREFIX, position):
            params.append(line[position + len(protocol.TRAILING_PREFIX):])
            break

        nextspace = line.find(protocol.ARGUMENT_SEPARATOR, position)
        if nextspace == -1:
            params.append(line[position:])
            break

        params.append(line[position:nextspace])
        position = _skip_spaces(line, nextspace + 1)

    return ParsedMessage(command, params, prefix=prefix, tags=tags, raw=line)


def parse_tags(raw):
    """
    Parse tag block contents (without the leading indicator) into a dictionary.
    A tag's value is the flag `True` if and only if no non-empty string follows the value separator.
    Values are kept verbatim.
    """
    tags = {}
    for raw_tag in raw.split(protocol.TAG_SEPARATOR):
        tag, _, value = raw_tag.partition(protocol.TAG_VALUE_SEPARATOR)
        if value == '':
            value = protocol.TAG_FLAG
        tags[tag] = value
    return tags


def check_tag(tag, value):
    """
    Check that a tag can be constructed in a way that tokenizes back to the same key and value.
    Values are not escaped, so they may not contain separators, and an empty string value would read back as the flag.
    """
    if any(sep in tag for sep in (protocol.ARGUMENT_SEPARATOR, protocol.TAG_SEPARATOR, protocol.TAG_VALUE_SEPARATOR)):
        raise protocol.ProtocolViolation('Invalid tag name: {!r}'.format(tag), message=tag)
    if value is protocol.TAG_FLAG:
        return
    if value == '' or any(sep in value for sep in (protocol.ARGUMENT_SEPARATOR, protocol.TAG_SEPARATOR)):
        raise protocol.ProtocolViolation('Invalid value for tag {}: {!r}'.format(tag, value), message=value)


def parse_user(raw):
    """ Parse nick(!user)?(@host)? structure. """
    nick = raw
    user = None
    host = None

    if raw is None:
        return nick, user, host

    # Attempt to extract host.
    if protocol.HOST_SEPARATOR in raw:
        raw, host = raw.split(protocol.HOST_SEPARATOR, 1)
        nick = raw
    # Attempt to extract user.
    if protocol.USER_SEPARATOR in raw:
        nick, user = raw.split(protocol.USER_SEPARATOR, 1)

    return nick, user, host


## Construction.

PRIVMSG = 'PRIVMSG'


def build_privmsg(channel, content):
    """
    Construct a raw PRIVMSG line sending content to channel, which is normalized into channel form.
    Content is not split: use `splitting.iter_chunks` first for payloads above the length limit.
    """
    channel = channels.to_channel_form(channel)
    if channel == protocol.CHANNEL_PREFIX or protocol.ARGUMENT_SEPARATOR in channel:
        raise protocol.ProtocolViolation('Invalid channel name: {!r}'.format(channel), message=channel)
    if not content:
        raise protocol.ProtocolViolation('Cannot send an empty message.', message=content)

    message = '{cmd} {channel} {trailing}{content}'.format(
        cmd=PRIVMSG, channel=channel, trailing=protocol.TRAILING_PREFIX, content=content)
    if any(ch in message for ch in protocol.FORBIDDEN_CHARACTERS):
        raise protocol.ProtocolViolation('The constructed message contains forbidden characters.', message=message)
    return message
