"""Pytest fixtures: an in-process fake MPD server."""

import asyncio
from unittest.mock import MagicMock

import pytest

GREETING = b"OK MPD 0.19.9\n"


class FakeServer:
    """Answers each command line with a canned reply.

    ``replies`` maps a command line (without newline) to the raw bytes sent
    back; ``None`` makes the server drop the connection instead. Commands
    without a canned reply get ``OK\\n``.
    """

    def __init__(self, replies=None, greeting=GREETING):
        self.replies = dict(replies or {})
        self.greeting = greeting
        self.received = []
        self.host = "127.0.0.1"
        self.port = None
        self._server = None

    async def _handle(self, reader, writer):
        writer.write(self.greeting)
        await writer.drain()

        while True:
            line = await reader.readline()
            if not line:
                break

            command = line.decode("utf8").rstrip("\n")
            self.received.append(command)

            reply = self.replies.get(command, b"OK\n")
            if reply is None:
                break

            writer.write(reply)
            await writer.drain()

        writer.close()

    async def __aenter__(self):
        self._server = await asyncio.start_server(self._handle, self.host, 0)
        self.port = self._server.sockets[0].getsockname()[1]
        return self

    async def __aexit__(self, *exc):
        self._server.close()
        await self._server.wait_closed()


@pytest.fixture
def mpd_server():
    """Factory for fake servers, use as ``async with mpd_server(...)``."""
    return FakeServer


@pytest.fixture
def fake_connection():
    """Stand-in for Connection as seen by the framing protocol."""
    connection = MagicMock()
    connection._received_data = asyncio.Queue()
    return connection


STATUS_PLAYING = (
    "volume: 73\n"
    "repeat: 0\n"
    "random: 1\n"
    "single: 0\n"
    "consume: 0\n"
    "playlist: 4\n"
    "playlistlength: 12\n"
    "mixrampdb: 0.000000\n"
    "state: play\n"
    "song: 3\n"
    "songid: 4\n"
    "time: 75:245\n"
    "elapsed: 74.852\n"
    "bitrate: 320\n"
    "audio: 44100:24:2\n"
    "nextsong: 4\n"
    "nextsongid: 5"
)

STATUS_STOPPED = (
    "volume: -1\n"
    "repeat: 1\n"
    "random: 0\n"
    "single: 1\n"
    "consume: 1\n"
    "playlist: 2\n"
    "playlistlength: 0\n"
    "state: stop"
)


@pytest.fixture
def status_playing():
    return STATUS_PLAYING


@pytest.fixture
def status_stopped():
    return STATUS_STOPPED
