## badges.py
# Badge list decoding.
from . import protocol

__all__ = [ 'decode_badges', 'parse_level' ]


def parse_level(raw):
    """
    Parse badge level text into an integer.
    Leading whitespace and trailing garbage are ignored, as in `12abc`. Returns None if there is no number to read.
    """
    if raw is None:
        return None

    match = protocol.BADGE_LEVEL_PATTERN.match(raw)
    if not match:
        return None
    return int(match.group(1))


def decode_badges(raw):
    """
    Decode a `name/level,name/level` badge list into a dictionary of badge name to level.
    Levels that are missing or not numeric are stored as None. The empty string decodes to a single entry keyed by ''.
    """
    badges = {}
    for badge in raw.split(protocol.BADGE_SEPARATOR):
        name, _, level = badge.partition(protocol.BADGE_LEVEL_SEPARATOR)
        badges[name] = parse_level(level)
    return badges
