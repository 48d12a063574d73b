import io
import json
import logging

import pytest

from tmiline.utils import run, split

pytestmark = [pytest.mark.cli]

LINES = [
    ':nick!user@host PRIVMSG #chan :Hello world',
    '@badge-info=;badges=subscriber/12 :foo!foo@x PRIVMSG #bar :hi there',
    ':tmi.twitch.tv',
    '',
    'PING :tmi.example.tv',
]


@pytest.fixture
def lines_file(tmp_path):
    path = tmp_path / 'lines.txt'
    path.write_bytes(('\r\n'.join(LINES) + '\r\n').encode('utf-8'))
    return str(path)


def test_run_prints_messages(lines_file, capsys):
    assert run.main([lines_file]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "<nick!user@host> PRIVMSG ['#chan', 'Hello world'] {}",
        "<foo!foo@x> PRIVMSG ['#bar', 'hi there'] {'badge-info': True, 'badges': 'subscriber/12'}",
        "PING ['tmi.example.tv'] {}",
    ]


def test_run_json(lines_file, capsys):
    assert run.main(['--json', lines_file]) == 0

    messages = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert len(messages) == 3
    assert messages[1] == {
        'tags': {'badge-info': True, 'badges': 'subscriber/12'},
        'prefix': 'foo!foo@x',
        'command': 'PRIVMSG',
        'params': ['#bar', 'hi there'],
    }


def test_run_logs_malformed_lines(lines_file, caplog):
    caplog.set_level(logging.WARNING)
    assert run.main(['--verbose', lines_file]) == 0
    assert 'unterminated prefix' in caplog.text


def test_run_strict(lines_file):
    assert run.main(['--strict', lines_file]) == 1


def test_run_strict_ignores_blank_lines(tmp_path, capsys):
    path = tmp_path / 'blank.txt'
    path.write_bytes(b'\r\nPING :tmi.example.tv\r\n\n\r\n')

    assert run.main(['--strict', str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["PING ['tmi.example.tv'] {}"]


def test_run_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.TextIOWrapper(io.BytesIO(b'PING :caf\xe9\n')))

    assert run.main(['--strict']) == 0
    assert capsys.readouterr().out.splitlines() == ["PING ['café'] {}"]


def test_run_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run.main(['--version'])

    assert excinfo.value.code == 0
    assert 'tmiline 0.1.0' in capsys.readouterr().out


def test_split_prints_chunks(capsys):
    assert split.main(['--limit', '9', 'aaaa bbbb cccccccc']) == 0
    assert capsys.readouterr().out.splitlines() == ['aaaa', 'bbbb', 'cccccccc']


def test_split_privmsg_lines(capsys):
    assert split.main(['--limit', '9', '--channel', 'Bar', 'aaaa bbbb cccccccc']) == 0
    assert capsys.readouterr().out.splitlines() == [
        'PRIVMSG #bar :aaaa',
        'PRIVMSG #bar :bbbb',
        'PRIVMSG #bar :cccccccc',
    ]


def test_split_invalid_channel(capsys, caplog):
    assert split.main(['--channel', '#b ar', 'hi']) == 1
    assert capsys.readouterr().out == ''
    assert 'Invalid channel name' in caplog.text


def test_split_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.TextIOWrapper(io.BytesIO(b'one two\nthree\n')))

    assert split.main(['-l', '5']) == 0
    assert capsys.readouterr().out.splitlines() == ['one', 'two', 'three']


def test_split_rejects_nonpositive_limit():
    with pytest.raises(SystemExit) as excinfo:
        split.main(['--limit', '0', 'hi'])
    assert excinfo.value.code == 2
