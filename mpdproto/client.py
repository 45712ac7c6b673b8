import asyncio
import logging
from enum import Enum
from typing import List, Optional

from .commands import CurrentSong, GetStatus, ListAll, PlaylistInfo, encode
from .config import get_address
from .exceptions import ConnectionStateError, HandshakeError
from .exceptions import ParseError, ParseTypeError, TransportError
from .helpers import lock
from .protocol import Protocol
from .types import Song, Status, Version

log = logging.getLogger(__name__)

GREETING = 'OK MPD '


class ConnectionState(Enum):
    CLOSED = 'closed'
    HANDSHAKING = 'handshaking'
    READY = 'ready'
    AWAITING_REPLY = 'awaiting_reply'
    FAULTED = 'faulted'


class Connection:
    """ Connection to music player daemon.

    One command is in flight at a time: ``send`` a command, then
    ``receive`` its reply before sending the next one. After a server
    error or a transport failure the connection is faulted and must be
    replaced with a new one.

    :param float timeout: seconds to wait for connect and for every reply
        (default: `None`, wait forever)
    """
    _transport = None
    _protocol = None
    _version = None
    _version_string = None
    state = ConnectionState.CLOSED

    def __init__(self, timeout: Optional[float]=None) -> None:
        self.timeout = timeout
        self._lock = asyncio.Lock()
        self._received_data = asyncio.Queue()

    @classmethod
    async def open(
        cls, host: Optional[str]=None, port: Optional[int]=None, *,
        timeout: Optional[float]=None,
        loop: Optional[asyncio.AbstractEventLoop]=None,
    ) -> 'Connection':
        """ Classmethod for create the connection to mpd server.

        :param str host: hostname for connection
            (default: `$MPD_HOST` or `'localhost'`)
        :param int port: port for connection (default: `$MPD_PORT` or `6600`)
        :param float timeout: see :class:`Connection`
        :param AbstractEventLoop loop: event loop (default: running loop)
        :return: new Connection instance
        :raises TransportError: if the server is unreachable
        :raises HandshakeError: if the greeting is not understood
        """
        connection = cls(timeout=timeout)
        await connection._connect(host, port, loop)
        return connection

    def _on_connection_closed(self):
        self._transport = None
        self._protocol = None

        if self.state is ConnectionState.READY:
            self.state = ConnectionState.CLOSED

    async def _connect(self, host, port, loop):
        host, port = get_address(host, port)

        if loop is None:
            loop = asyncio.get_running_loop()

        self.state = ConnectionState.HANDSHAKING

        _pf = lambda: Protocol(self)  # noqa
        try:
            t, p = await asyncio.wait_for(
                loop.create_connection(_pf, host, port), self.timeout)
        except (OSError, asyncio.TimeoutError) as exc:
            self.state = ConnectionState.CLOSED
            raise TransportError(
                "can't connect to {}:{}".format(host, port)) from exc

        self._transport = t
        self._protocol = p
        log.debug("connected to %s:%s", host, port)

        try:
            welcome = await self._get_reply()
            welcome = welcome.strip().decode('utf8', 'replace')
            log.debug("welcome string %r", welcome)
            self._handshake(welcome)
        except (TransportError, HandshakeError, asyncio.CancelledError):
            self.close()
            raise

        self.state = ConnectionState.READY

    def _handshake(self, welcome: str):
        if not welcome.startswith(GREETING):
            raise HandshakeError(welcome, "expected 'OK MPD <version>'")

        self._version_string = welcome[len(GREETING):]

        try:
            self._version = Version.parse(self._version_string)
        except ParseError as exc:
            raise HandshakeError(welcome, str(exc)) from exc

    def _fault(self):
        # a connection closed by the caller stays closed
        if self.state is not ConnectionState.CLOSED:
            self.state = ConnectionState.FAULTED

    async def _get_reply(self) -> bytes:
        # Wait for the next framed reply, fault the connection on failure
        try:
            res = await asyncio.wait_for(
                self._received_data.get(), self.timeout)
        except asyncio.TimeoutError:
            self._fault()
            raise TransportError(
                "no reply in {} seconds".format(self.timeout)) from None
        except asyncio.CancelledError:
            # reply to the cancelled command is still due
            self._fault()
            raise

        if isinstance(res, Exception):
            self._fault()
            raise res

        return res

    @property
    def version(self) -> Version:
        return self._version

    @property
    def version_string(self) -> str:
        return self._version_string

    async def send(self, command) -> None:
        """ Send command to server.

        :raises ConnectionStateError: if a reply is pending, or the connection
            is closed or faulted
        :raises TransportError: if the stream is closing
        """
        if self.state is not ConnectionState.READY:
            raise ConnectionStateError(
                "can't send command, connection is {}".format(self.state.value))

        if self._transport is None or self._transport.is_closing():
            self.state = ConnectionState.FAULTED
            raise TransportError("connection closed")

        prepared = encode(command) + '\n'
        self._transport.write(prepared.encode('utf8'))
        self.state = ConnectionState.AWAITING_REPLY
        log.debug("data sent: %r", prepared)

    async def receive(self) -> str:
        """ Wait for reply to the sent command.

        :return: response body without the ``OK`` terminator, may be empty
            and without trailing newlines; an empty value on the last line
            (``Title: ``) is kept
        :raises ServerError: if server replied with ``ACK``
        :raises TransportError: on lost connection or timeout
        """
        if self.state is not ConnectionState.AWAITING_REPLY:
            raise ConnectionStateError(
                "nothing to receive, connection is {}".format(self.state.value))

        res = await self._get_reply()
        self.state = ConnectionState.READY

        try:
            return res.decode('utf8').rstrip('\n')
        except UnicodeDecodeError as exc:
            raise ParseTypeError('utf8', repr(res)) from exc

    @lock
    async def execute(self, command) -> str:
        """ Send command and return its reply body.
        """
        await self.send(command)
        return await self.receive()

    async def status(self, strict: bool=False) -> Status:
        """ Get status.
        """
        return Status.parse(await self.execute(GetStatus()), strict)

    async def current_song(self, strict: bool=False) -> Song:
        """ Return current song info.
        """
        return Song.parse(await self.execute(CurrentSong()), strict)

    async def playlist(self) -> List[Song]:
        """ Songs of the current playlist.
        """
        return Song.parse_list(await self.execute(PlaylistInfo()))

    async def list_all(self, uri: Optional[str]=None) -> List[str]:
        """ List files in ``uri`` recursively, directories are skipped.
        """
        raw = await self.execute(ListAll(uri))
        prefix = 'file: '
        return [l[len(prefix):] for l in raw.split('\n') if l.startswith(prefix)]

    def close(self) -> None:
        """ Close connection, pending receive fails with `TransportError`.
        """
        self.state = ConnectionState.CLOSED

        if self._transport is not None:
            self._transport.close()

        self._transport = None
        self._protocol = None

    async def __aenter__(self) -> 'Connection':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()


async def connect(host: Optional[str]=None, port: Optional[int]=None, *,
                  timeout: Optional[float]=None,
                  loop: Optional[asyncio.AbstractEventLoop]=None,
                  ) -> Connection:
    """ Connect to mpd server, see :meth:`Connection.open`.
    """
    return await Connection.open(host, port, timeout=timeout, loop=loop)
