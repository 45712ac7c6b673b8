import re
from typing import Optional, Tuple


class MPDError(Exception):
    """ Base class for all errors raised by this library.
    """


class TransportError(MPDError):
    """ Stream connect, read or write failure.
    """


class HandshakeError(MPDError):
    """ Server greeting is not ``OK MPD <major>.<minor>.<patch>``.
    """
    def __init__(self, greeting: str, reason: str='') -> None:
        self.greeting = greeting
        self.reason = reason
        msg = "bad greeting {!r}".format(greeting)
        if reason:
            msg = '{}: {}'.format(msg, reason)

        super().__init__(msg)


class ConnectionStateError(MPDError):
    """ Command issued on a closed or faulted connection.
    """


class ServerError(MPDError):
    """ ``ACK`` reply from server.

    Known fields are parsed from ``ACK [error@command_listNum] {command} message``
    and are ``None`` when the line has another shape.
    """
    RE = re.compile(r'^ACK \[(\d+)@(\d+)\] \{(.*?)\} ?(.*)$')

    error = None
    command_list_num = None
    command = None
    message = None

    def __init__(self, data: bytes) -> None:
        self.text = text = data.decode('utf8', 'replace').strip()
        super().__init__(text)

        parsed = self.RE.match(text)
        if parsed is None:
            return

        self.error = int(parsed.group(1))
        self.command_list_num = int(parsed.group(2))
        self.command = parsed.group(3)
        self.message = parsed.group(4)


class ParseError(MPDError):
    """ Response body can't be decoded to the expected record.
    """


class ExpectedKeyError(ParseError):
    """ Required ``key`` was not found in ``lines``.

    ``missing`` holds every required key that was not found.
    """
    def __init__(self, key: str, lines: str,
                 missing: Optional[Tuple[str, ...]]=None) -> None:
        self.key = key
        self.lines = lines
        self.missing = missing or (key,)
        super().__init__("expected to find key {} in:\n{}".format(key, lines))


class MissingKeyError(ParseError):
    """ The ``{key}`` part of ``{key}: {value}`` is empty.
    """
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(
            "missing {{key}} when parsing {!r} as "
            "\"{{key}}: {{value}}\"".format(line))


class MissingValueError(ParseError):
    """ The ``{value}`` part of ``{key}: {value}`` is absent.
    """
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(
            "missing {{value}} when parsing {!r} as "
            "\"{{key}}: {{value}}\"".format(line))


class ParseTypeError(ParseError):
    """ ``value`` can't be converted to ``ty``.
    """
    def __init__(self, ty: str, value: str) -> None:
        self.ty = ty
        self.value = value
        super().__init__("couldn't parse {!r} as {}".format(value, ty))


class UnhandledKeyError(ParseError):
    """ Pair not recognized by a decoder running in strict mode.
    """
    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(
            "unhandled key-value pair: ({}, {})".format(key, value))
