""" Client for the music player daemon protocol, for asyncio.
"""
from .client import Connection, ConnectionState, connect
from .commands import Add, Clear, CurrentSong, ListAll, Next, Pause, Play
from .commands import PlaylistInfo, Previous, Set, GetStatus, Stop, Update
from .commands import Volume, encode
from .config import get_address
from .exceptions import MPDError, TransportError, HandshakeError
from .exceptions import ConnectionStateError, ServerError, ParseError
from .exceptions import ExpectedKeyError, MissingKeyError, MissingValueError
from .exceptions import ParseTypeError, UnhandledKeyError
from .types import Extra, Mode, Song, State, Status, Time, Version

__all__ = [
    'connect', 'Connection', 'ConnectionState',
    'Add', 'Clear', 'CurrentSong', 'ListAll', 'Next', 'Pause', 'Play',
    'PlaylistInfo', 'Previous', 'Set', 'GetStatus', 'Stop', 'Update',
    'Volume', 'encode',
    'get_address',
    'MPDError', 'TransportError', 'HandshakeError', 'ConnectionStateError',
    'ServerError', 'ParseError', 'ExpectedKeyError', 'MissingKeyError',
    'MissingValueError', 'ParseTypeError', 'UnhandledKeyError',
    'Extra', 'Mode', 'Song', 'State', 'Status', 'Time', 'Version',
]
