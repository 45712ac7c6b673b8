""" Commands and their wire format.

Every command encodes to exactly one line, without the trailing newline.
String arguments are wrapped in double quotes as is: embedded quotes are
not escaped, so they must not appear in uris.
"""
from collections import namedtuple
from typing import Optional

from .types import Mode


def _quote(value: str) -> str:
    return '"{}"'.format(value)


def _flag(value: bool) -> str:
    return '1' if value else '0'


class Add(namedtuple('Add', ['uri'])):
    """ Add file or directory (recursively) to the playlist.
    """
    __slots__ = ()

    def encode(self) -> str:
        return 'add {}'.format(_quote(self.uri))


class Clear(namedtuple('Clear', [])):
    """ Clear the current playlist.
    """
    __slots__ = ()

    def encode(self) -> str:
        return 'clear'


class CurrentSong(namedtuple('CurrentSong', [])):
    """ Song info of the current song.
    """
    __slots__ = ()

    def encode(self) -> str:
        return 'currentsong'


class ListAll(namedtuple('ListAll', ['uri'])):
    """ List all songs and directories in ``uri``, or in whole database.
    """
    __slots__ = ()

    def __new__(cls, uri: Optional[str]=None) -> 'ListAll':
        return super().__new__(cls, uri)

    def encode(self) -> str:
        if self.uri is None:
            return 'listall'

        return 'listall {}'.format(_quote(self.uri))


class Next(namedtuple('Next', [])):
    __slots__ = ()

    def encode(self) -> str:
        return 'next'


class Pause(namedtuple('Pause', ['state'])):
    """ Pause (``state=True``) or resume playing.
    """
    __slots__ = ()

    def __new__(cls, state: bool=True) -> 'Pause':
        return super().__new__(cls, state)

    def encode(self) -> str:
        return 'pause {}'.format(_flag(self.state))


class Play(namedtuple('Play', ['pos'])):
    """ Play the playlist from ``pos`` (0-based), or resume the current song.
    """
    __slots__ = ()

    def __new__(cls, pos: Optional[int]=None) -> 'Play':
        return super().__new__(cls, pos)

    def encode(self) -> str:
        if self.pos is None:
            return 'play'

        return 'play {}'.format(self.pos)


class PlaylistInfo(namedtuple('PlaylistInfo', [])):
    __slots__ = ()

    def encode(self) -> str:
        return 'playlistinfo'


class Previous(namedtuple('Previous', [])):
    __slots__ = ()

    def encode(self) -> str:
        return 'previous'


class Set(namedtuple('Set', ['mode', 'state'])):
    """ Enable or disable one of playback modes.
    """
    __slots__ = ()

    def encode(self) -> str:
        return '{} {}'.format(Mode(self.mode).value, _flag(self.state))


class GetStatus(namedtuple('GetStatus', [])):
    """ Player status and volume level.
    """
    __slots__ = ()

    def encode(self) -> str:
        return 'status'


class Stop(namedtuple('Stop', [])):
    __slots__ = ()

    def encode(self) -> str:
        return 'stop'


class Update(namedtuple('Update', ['uri'])):
    """ Update the music database, or only ``uri`` in it.
    """
    __slots__ = ()

    def __new__(cls, uri: Optional[str]=None) -> 'Update':
        return super().__new__(cls, uri)

    def encode(self) -> str:
        if self.uri is None:
            return 'update'

        return 'update {}'.format(_quote(self.uri))


class Volume(namedtuple('Volume', ['level'])):
    __slots__ = ()

    def encode(self) -> str:
        return 'setvol {}'.format(self.level)


COMMANDS = (
    Add, Clear, CurrentSong, ListAll, Next, Pause, Play, PlaylistInfo,
    Previous, Set, GetStatus, Stop, Update, Volume,
)


def encode(command) -> str:
    """ Wire line for ``command``.
    """
    if not isinstance(command, COMMANDS):
        raise TypeError("not a command: {!r}".format(command))

    return command.encode()
