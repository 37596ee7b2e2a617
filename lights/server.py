"""TCP server that accepts game clients and speaks the login protocol with them."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from lights.messages import (
    AccountLoggedInElsewhere,
    AuthenticationFailed,
    AuthenticationRequest,
    AuthenticationSuccessful,
    ClientMessageType,
)

__all__ = ["DEFAULT_PORT", "ConnectedClient", "Server"]

DEFAULT_PORT = 1337

_log = logging.getLogger(__name__)

OnClose = Callable[[], None]
OnLoginRequest = Callable[[str, str], None]


class ConnectedClient:
    """One client connection: reads its requests and writes server messages to it."""

    def __init__(self, reader: asyncio.StreamReader, writer: Any) -> None:
        self._reader = reader
        self._writer = writer
        self.on_close: OnClose | None = None
        self.on_login_request: OnLoginRequest | None = None

    def _notify_close(self) -> None:
        if self.on_close is not None:
            self.on_close()

    async def run(self) -> None:
        """Read and dispatch messages until the client goes away."""
        while True:
            try:
                tag = (await self._reader.readexactly(1))[0]
                if tag == ClientMessageType.AUTHENTICATION_REQUEST:
                    request = await AuthenticationRequest.read_from(self._reader)
                    if self.on_login_request is not None:
                        self.on_login_request(request.email, request.password)
                else:
                    _log.error("Unknown message type: %d", tag)
            except (asyncio.IncompleteReadError, ConnectionResetError):
                _log.info("Connection closed by client")
                self._notify_close()
                return
            except UnicodeDecodeError as exc:
                _log.error("Malformed message from client: %s", exc)
            except OSError as exc:
                _log.error("Error reading message type from client: %s", exc)
                return

    def _write(self, message: Any) -> None:
        try:
            if self._writer.is_closing():
                raise ConnectionError("connection is closed")
            self._writer.write(bytes(message))
        except (OSError, RuntimeError) as exc:
            _log.error("Error writing to client: %s", exc)
            self._notify_close()

    def send_login_response(self, success: bool, username: str) -> None:
        """Tell the client whether its login worked."""
        if not success:
            self._write(AuthenticationFailed())
            return
        self._write(AuthenticationSuccessful(username))

    def logged_in_elsewhere(self) -> None:
        """Tell the client its account logged in from another connection."""
        self._write(AccountLoggedInElsewhere())

    @property
    def is_open(self) -> bool:
        """Whether the connection is still open."""
        return not self._writer.is_closing()

    def close(self) -> None:
        """Close the connection; closing twice only logs an error."""
        if self._writer.is_closing():
            _log.error("Socket is not open")
            return
        try:
            self._writer.close()
        except OSError as exc:
            _log.error("Error closing connection: %s", exc)
            return
        _log.info("Connection closed")


class Server:
    """Listens for clients and hands every new connection to ``on_new_client``."""

    HOST = "0.0.0.0"

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        on_new_client: Callable[[ConnectedClient], None] | None = None,
    ) -> None:
        self._port = port
        self.on_new_client = on_new_client
        self._server: asyncio.base_events.Server | None = None
        self._clients: set[ConnectedClient] = set()

    @property
    def port(self) -> int:
        """The port the server listens on."""
        if self._server is None or not self._server.sockets:
            raise RuntimeError("server is not started")
        return self._server.sockets[0].getsockname()[1]

    @property
    def clients(self) -> tuple[ConnectedClient, ...]:
        """The clients connected right now."""
        return tuple(self._clients)

    async def start(self) -> int:
        """Start listening and return the bound port."""
        self._server = await asyncio.start_server(self._handle, self.HOST, self._port)
        _log.info("Server started on port: %d", self.port)
        _log.info("Waiting for client to connect...")
        return self.port

    async def _handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        peer = writer.get_extra_info("peername")
        _log.info("Client connected: %s", peer[0] if peer else "unknown")
        client = ConnectedClient(reader, writer)
        self._clients.add(client)
        try:
            if self.on_new_client is None:
                _log.error("on_new_client not set")
            else:
                self.on_new_client(client)
            await client.run()
        finally:
            self._clients.discard(client)
            if client.is_open:
                client.close()

    async def stop(self) -> None:
        """Stop accepting clients and close every open connection."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        for client in list(self._clients):
            if client.is_open:
                client.close()
        await server.wait_closed()