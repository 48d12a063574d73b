## channels.py
# Channel and login name canonicalization.
from . import protocol

__all__ = [ 'to_channel_form', 'to_login_form' ]


def to_channel_form(name):
    """ Normalize a channel or login name into channel form: lowercase, with a leading `#`. """
    name = (name or '').lower()
    if name.startswith(protocol.CHANNEL_PREFIX):
        return name
    return protocol.CHANNEL_PREFIX + name


def to_login_form(name):
    """ Normalize a channel or login name into login form: lowercase, without leading `#`. """
    return (name or '').lower().lstrip(protocol.CHANNEL_PREFIX)
