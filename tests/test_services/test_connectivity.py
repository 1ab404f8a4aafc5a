"""Tests for the connectivity oracles."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from netlocale.services.connectivity import SocketConnectivity, StaticConnectivity


class TestStaticConnectivity:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("reachable", [True, False])
    async def test_fixed_answer(self, reachable):
        assert await StaticConnectivity(reachable).is_reachable() is reachable


class TestSocketConnectivity:
    @pytest.mark.asyncio
    async def test_reachable_when_connection_opens(self):
        writer = MagicMock()
        writer.wait_closed = AsyncMock()
        with patch(
            "netlocale.services.connectivity.asyncio.open_connection",
            AsyncMock(return_value=(MagicMock(), writer)),
        ) as open_connection:
            assert await SocketConnectivity("10.0.0.1", 443).is_reachable() is True

        open_connection.assert_awaited_once_with("10.0.0.1", 443)
        writer.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_unreachable_on_os_error(self):
        with patch(
            "netlocale.services.connectivity.asyncio.open_connection",
            AsyncMock(side_effect=OSError("Network is unreachable")),
        ):
            assert await SocketConnectivity().is_reachable() is False

    @pytest.mark.asyncio
    async def test_unreachable_on_slow_probe(self):
        async def hang(host, port):
            await asyncio.sleep(10)

        with patch("netlocale.services.connectivity.asyncio.open_connection", hang):
            assert await SocketConnectivity(timeout=0.05).is_reachable() is False

    @pytest.mark.asyncio
    async def test_real_listener(self):
        server = await asyncio.start_server(lambda r, w: w.close(), "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            assert await SocketConnectivity("127.0.0.1", port).is_reachable() is True
        finally:
            server.close()
            await server.wait_closed()
