## ctcp.py
# Client-to-Client-Protocol (CTCP) ACTION helpers.
__all__ = [ 'ACTION', 'is_ctcp', 'is_action', 'parse_action', 'construct_action' ]


CTCP_DELIMITER = '\x01'
ACTION = 'ACTION'


def is_ctcp(message):
    """ Check if message follows the CTCP format. """
    return len(message) > 1 and message.startswith(CTCP_DELIMITER) and message.endswith(CTCP_DELIMITER)


def parse_action(message):
    """ Return the text of an ACTION (`/me`) message, or None if the message is not one. """
    if not is_ctcp(message):
        return None

    query = message[len(CTCP_DELIMITER):-len(CTCP_DELIMITER)]
    type, _, contents = query.partition(' ')
    if type != ACTION or not contents or CTCP_DELIMITER in contents:
        return None
    return contents


def is_action(message):
    """ Check if message is an ACTION (`/me`) message. """
    return parse_action(message) is not None


def construct_action(contents):
    """ Construct ACTION message. """
    return CTCP_DELIMITER + ACTION + ' ' + contents + CTCP_DELIMITER
