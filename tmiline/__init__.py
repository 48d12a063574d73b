from . import protocol, parsing, badges, splitting, channels, ctcp

from .protocol import Error, ProtocolViolation, MESSAGE_LENGTH_LIMIT
from .parsing import ParsedMessage, Malformed, tokenize, parse_user, build_privmsg
from .badges import decode_badges
from .splitting import split_line, iter_chunks
from .channels import to_channel_form, to_login_form
from .ctcp import is_action, parse_action, construct_action

__name__ = 'tmiline'
__version__ = '0.1.0'
__version_info__ = (0, 1, 0)
__license__ = 'BSD'
