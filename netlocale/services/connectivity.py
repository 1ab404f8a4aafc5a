"""Connectivity oracles consulted before the network tier."""

import asyncio
import logging

_log = logging.getLogger(__name__)


class SocketConnectivity:
    """Reports the network as reachable if a TCP connection to a well-known host opens quickly."""

    def __init__(self, host: str = "1.1.1.1", port: int = 53, timeout: float = 1.5):
        self.host = host
        self.port = port
        self.timeout = timeout

    async def is_reachable(self) -> bool:
        try:
            _reader, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port), timeout=self.timeout
            )
        except (OSError, TimeoutError) as exc:
            _log.info("Network unreachable (%s:%s): %s", self.host, self.port, exc)
            return False

        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        return True


class StaticConnectivity:
    def __init__(self, reachable: bool):
        self.reachable = reachable

    async def is_reachable(self) -> bool:
        return self.reachable
