import asyncio
import logging

from .exceptions import ServerError, TransportError

log = logging.getLogger(__name__)

EOL = b'\n'
OK = b'OK'
ACK = b'ACK'


class Protocol(asyncio.Protocol):
    """ Frames the byte stream into replies.

    Replies are put to ``connection._received_data``: the greeting line
    and response bodies as ``bytes``, failures as exception instances.
    """
    def __init__(self, connection):
        self.connection = connection
        self._input_data = b""
        self._lines = []
        self._greeted = False

    def connection_made(self, transport):
        peername = transport.get_extra_info('peername')
        log.debug('connection to %s', peername)
        self.transport = transport

    def data_received(self, data: bytes):
        log.debug('data received: %r', data)

        self._input_data += data
        while EOL in self._input_data:
            line, self._input_data = self._input_data.split(EOL, 1)
            self._line_received(line)

    def _line_received(self, line: bytes):
        put = self.connection._received_data.put_nowait

        if not self._greeted:
            self._greeted = True
            put(line)

        elif line.startswith(ACK):
            self._lines = []
            put(ServerError(line))

        elif line == OK:
            body, self._lines = EOL.join(self._lines), []
            put(body)

        else:
            self._lines.append(line)

    def connection_lost(self, exc: Exception):
        log.debug('connection lost')
        if exc is not None:
            log.error('connection lost exc: %r', exc)

        error = TransportError("connection lost")
        error.__cause__ = exc
        self.connection._received_data.put_nowait(error)
        self.connection._on_connection_closed()
