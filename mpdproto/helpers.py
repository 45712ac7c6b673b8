import functools
import logging

from .exceptions import ConnectionStateError

log = logging.getLogger(__name__)


def lock(func):
    # lock connection method, so command and its reply are never interleaved
    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        if self._transport is None:
            log.error("connection closed")
            raise ConnectionStateError("connection closed")

        async with self._lock:
            return await func(self, *args, **kwargs)

    return wrapper
