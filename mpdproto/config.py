import os
from typing import Optional, Tuple

DEFAULT_HOST = 'localhost'
DEFAULT_PORT = 6600


def get_address(host: Optional[str]=None,
                port: Optional[int]=None) -> Tuple[str, int]:
    """ Resolve server address.

    Explicit arguments win, then ``MPD_HOST`` and ``MPD_PORT``
    environment variables, then ``localhost:6600``.

    :raises ValueError: if ``MPD_PORT`` is not a number
    """
    if host is None:
        host = os.environ.get('MPD_HOST') or DEFAULT_HOST

    if port is None:
        env_port = os.environ.get('MPD_PORT')
        if env_port:
            try:
                port = int(env_port)
            except ValueError:
                raise ValueError(
                    "bad MPD_PORT value: {!r}".format(env_port)) from None
        else:
            port = DEFAULT_PORT

    return host, port
