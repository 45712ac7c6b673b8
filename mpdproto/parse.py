""" Primitive value parsers and the ``key: value`` line scanner.

Record decoders in :mod:`mpdproto.types` are built from these.
"""
import re
from typing import Iterator, List, Optional, Tuple

from .exceptions import MissingKeyError, MissingValueError, ParseTypeError

SEPARATOR = ': '

_UINT_RE = re.compile(r'^[0-9]+$')
_FLOAT_RE = re.compile(r'^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$')

U8_MAX = 0xff
U32_MAX = 0xffffffff


def parse_bool(value: str) -> bool:
    """ Parse ``0`` or ``1``.
    """
    if value == '0':
        return False
    elif value == '1':
        return True
    else:
        raise ParseTypeError('bool', value)


def parse_uint(value: str, ty: str='u32', maximum: int=U32_MAX) -> int:
    """ Parse unsigned decimal integer not greater than ``maximum``.
    """
    if _UINT_RE.match(value) is None:
        raise ParseTypeError(ty, value)

    res = int(value)
    if res > maximum:
        raise ParseTypeError(ty, value)

    return res


def parse_float(value: str) -> float:
    if _FLOAT_RE.match(value) is None:
        raise ParseTypeError('f64', value)

    return float(value)


def parse_volume(value: str) -> Optional[int]:
    """ Parse volume level, ``-1`` means mpd can't control the volume.
    """
    if value == '-1':
        return None

    return parse_uint(value, 'u8', U8_MAX)


def parse_time(value: str) -> Tuple[int, int]:
    """ Parse ``elapsed:total`` pair of whole seconds.
    """
    elapsed, sep, total = value.partition(':')
    if not sep:
        raise ParseTypeError('Time', value)

    return parse_uint(elapsed), parse_uint(total)


def split_pair(line: str) -> Tuple[str, str]:
    """ Split one ``key: value`` line on the first separator.
    """
    key, sep, value = line.partition(SEPARATOR)

    if not sep:
        raise MissingValueError(line)
    elif not key:
        raise MissingKeyError(line)

    return key, value


def _lines(text: str) -> List[str]:
    # str.splitlines also breaks on unicode separators inside tag values
    text = text.rstrip('\n')
    return text.split('\n') if text else []


def scan_pairs(text: str) -> Iterator[Tuple[str, str]]:
    """ Iterate over ``(key, value)`` pairs, one for each line of ``text``.
    """
    for line in _lines(text):
        yield split_pair(line)


def split_records(text: str, leading_key: Optional[str]=None) -> List[str]:
    """ Split concatenated records, each starting with ``leading_key``.

    Without ``leading_key`` the key of the first line is used.
    """
    lines = _lines(text)
    if not lines:
        return []

    if leading_key is None:
        leading_key = split_pair(lines[0])[0]

    prefix = leading_key + SEPARATOR
    records = []
    current = []  # type: List[str]

    for line in lines:
        if line.startswith(prefix) and current:
            records.append('\n'.join(current))
            current = []

        current.append(line)

    records.append('\n'.join(current))
    return records
