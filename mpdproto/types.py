from collections import namedtuple
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import ExpectedKeyError, ParseTypeError, UnhandledKeyError
from .parse import parse_bool, parse_float, parse_time, parse_uint
from .parse import parse_volume, scan_pairs, split_records


class State(str, Enum):
    """ Playback state.
    """
    PLAY = 'play'
    PAUSE = 'pause'
    STOP = 'stop'

    @classmethod
    def parse(cls, value: str) -> 'State':
        try:
            return cls(value)
        except ValueError:
            raise ParseTypeError('State', value) from None


class Mode(str, Enum):
    """ Playback modes, values are the command names.

    In consume mode each played song is removed from the playlist.
    In single mode playback stops after the current song, or the song
    is repeated if repeat mode is enabled.
    """
    CONSUME = 'consume'
    RANDOM = 'random'
    REPEAT = 'repeat'
    SINGLE = 'single'


def _decode(text: str,
            parsers: Dict[str, Callable],
            required: Tuple[str, ...],
            strict: bool) -> dict:
    # Scan `text` and apply the parser registered for each key
    found = {}

    for key, value in scan_pairs(text):
        parser = parsers.get(key)
        if parser is not None:
            found[key] = parser(value)
        elif strict:
            raise UnhandledKeyError(key, value)

    missing = tuple(k for k in required if k not in found)
    if missing:
        raise ExpectedKeyError(missing[0], text, missing)

    return found


class Version(namedtuple('Version', ['major', 'minor', 'patch'])):
    """ Protocol version announced in the server greeting.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> 'Version':
        """ Parse ``major.minor.patch``.
        """
        parts = text.split('.')
        if len(parts) != 3:
            raise ParseTypeError('Version', text)

        return cls(*(parse_uint(p, 'Version') for p in parts))

    def __str__(self) -> str:
        return '{}.{}.{}'.format(*self)


class Time(namedtuple('Time', ['elapsed', 'total'])):
    """ Elapsed and total time of the current song in whole seconds.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, value: str) -> 'Time':
        return cls(*parse_time(value))


Extra = namedtuple('Extra', [
    'pos',  # int, position in playlist, 0-based
    'elapsed',  # Optional[float]
    'time',  # Optional[Time]
])


_STATUS_PARSERS = {
    'consume': parse_bool,
    'elapsed': parse_float,
    'playlistlength': parse_uint,
    'random': parse_bool,
    'repeat': parse_bool,
    'single': parse_bool,
    'song': parse_uint,
    'state': State.parse,
    'time': Time.parse,
    'updating_db': parse_uint,
    'volume': parse_volume,
}

_STATUS_REQUIRED = (
    'consume', 'playlistlength', 'random', 'repeat', 'single',
    'state', 'volume',
)


class Status(namedtuple('Status', [
    'state',  # State
    'consume', 'random', 'repeat', 'single',  # bool
    'playlist_length',  # int
    'volume',  # Optional[int], None when mpd can't control the volume
    'updating_db',  # Optional[int], id of the running db update job
    'extra',  # Optional[Extra], only when a song is loaded
])):
    __slots__ = ()

    @classmethod
    def parse(cls, text: str, strict: bool=False) -> 'Status':
        """ Decode body of the ``status`` command.

        :param str text: response body
        :param bool strict: reject keys this decoder doesn't know
        :raises ParseError: on malformed or incomplete body
        """
        parsed = _decode(text, _STATUS_PARSERS, _STATUS_REQUIRED, strict)

        if 'song' in parsed:
            extra = Extra(
                pos=parsed['song'],
                elapsed=parsed.get('elapsed'),
                time=parsed.get('time'),
            )
        else:
            extra = None

        return cls(
            state=parsed['state'],
            consume=parsed['consume'],
            random=parsed['random'],
            repeat=parsed['repeat'],
            single=parsed['single'],
            playlist_length=parsed['playlistlength'],
            volume=parsed['volume'],
            updating_db=parsed.get('updating_db'),
            extra=extra,
        )


_SONG_PARSERS = {
    'Artist': str,
    'Title': str,
}

_SONG_REQUIRED = ('Artist', 'Title')


class Song(namedtuple('Song', ['artist', 'title'])):
    """ Song info. Other tags sent by server are not kept.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, text: str, strict: bool=False) -> 'Song':
        """ Decode one song, as sent for ``currentsong``.
        """
        parsed = _decode(text, _SONG_PARSERS, _SONG_REQUIRED, strict)
        return cls(artist=parsed['Artist'], title=parsed['Title'])

    @classmethod
    def parse_list(cls, text: str,
                   leading_key: Optional[str]=None,
                   strict: bool=False) -> List['Song']:
        """ Decode list of songs, as sent for ``playlistinfo``.

        :param str text: response body
        :param str leading_key: key starting every song
            (default: key of the first line)
        :param bool strict: reject unknown keys
        """
        return [cls.parse(record, strict)
                for record in split_records(text, leading_key)]
