## splitting.py
# Splitting outgoing payloads into sendable lines.
from . import protocol

__all__ = [ 'split_line', 'iter_chunks' ]


def split_line(text, limit):
    """
    Split text into a (head, tail) pair where head is at most `limit` characters long.

    The split happens at the last space within the first `limit` characters, and that space is dropped.
    If there is no such space, the text is cut hard: head holds the first `limit - 1` characters,
    and tail starts right after the `limit`th character, which is dropped.
    """
    if limit <= 0:
        raise ValueError('Line length limit must be positive, got {}.'.format(limit))

    if len(text) <= limit:
        return text, ''

    index = text.rfind(protocol.ARGUMENT_SEPARATOR, 0, limit)
    if index == -1:
        return text[:limit - 1], text[limit:]
    return text[:index], text[index + 1:]


def iter_chunks(text, limit=protocol.MESSAGE_LENGTH_LIMIT):
    """
    Yield successive sendable chunks of text, splitting each remainder again until nothing is left.
    Empty chunks, left over from leading or doubled spaces at a split point, are skipped.
    """
    if limit <= 0:
        raise ValueError('Line length limit must be positive, got {}.'.format(limit))

    while text:
        head, text = split_line(text, limit)
        if head:
            yield head
