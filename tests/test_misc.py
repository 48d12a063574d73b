"""
test_misc.py ~ Testing of Misc. Functions

Designed for those simple functions that don't need their own dedicated test files
But we want to hit them anyways
"""
import pytest

import tmiline
from tmiline import protocol


@pytest.mark.parametrize(
    "line, expected",
    [
        ('PING\r\n', 'PING'),
        ('PING\n', 'PING'),
        ('PING', 'PING'),
        ('PING\n\n', 'PING\n'),
    ]
)
def test_strip_line_separator(line, expected):
    assert protocol.strip_line_separator(line) == expected


def test_decode():
    assert protocol.decode(b'caf\xc3\xa9') == 'café'
    # Invalid UTF-8 falls back to latin-1.
    assert protocol.decode(b'caf\xe9') == 'café'
    assert protocol.decode(b'caf\xe9', encoding='iso-8859-1') == 'café'


def test_protocol_violation():
    error = protocol.ProtocolViolation('bad', message='PRIVMSG #chan :\n')

    assert isinstance(error, tmiline.Error)
    assert error.irc_message == 'PRIVMSG #chan :\n'
    assert str(error) == 'bad'


def test_exports():
    message = tmiline.tokenize('@badges=subscriber/12 :foo!foo@x PRIVMSG #Bar :hi')

    assert isinstance(message, tmiline.ParsedMessage)
    assert tmiline.decode_badges(message.tags['badges']) == {'subscriber': 12}
    assert tmiline.parse_user(message.prefix) == ('foo', 'foo', 'x')
    assert tmiline.to_login_form(message.params[0]) == 'bar'
    assert isinstance(tmiline.tokenize('@x'), tmiline.Malformed)
    assert tmiline.split_line('hi', tmiline.MESSAGE_LENGTH_LIMIT) == ('hi', '')
