"""The game server: players, their logins and the tick loop."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import threading
from collections import deque
from collections.abc import Callable
from typing import Any

from pymongo.errors import PyMongoError

from lights.database import CONNECTION_STRING, DATABASE_NAME, User, connect
from lights.server import DEFAULT_PORT, ConnectedClient, Server
from lights.units import VERSION_MAJOR, VERSION_MINOR

__all__ = ["ServerPlayer", "ServerGame", "main"]

_log = logging.getLogger(__name__)

PlayerCallback = Callable[["ServerPlayer"], None]


class ServerPlayer:
    """A connected client together with the account it logged in to."""

    def __init__(self, client: Any, database: Any) -> None:
        self._client = client
        self._database = database
        self.user = User()
        self.on_player_left: PlayerCallback | None = None
        self.on_player_logged_in: PlayerCallback | None = None
        client.on_close = self._handle_close
        client.on_login_request = self._handle_login_request

    @property
    def email(self) -> str:
        """The e-mail address of the logged-in account, empty before login."""
        return self.user.email

    @property
    def client(self) -> Any:
        """The connection this player talks through."""
        return self._client

    def _handle_close(self) -> None:
        if self._database is not None:
            self._database.logout_user(self.user.email)
        if self.on_player_left is not None:
            self.on_player_left(self)

    def _handle_login_request(self, email: str, password: str) -> None:
        if self._database is None:
            return
        logged_in = self._database.login_user(email, password)
        self._client.send_login_response(
            logged_in is not None, logged_in.email if logged_in is not None else ""
        )
        if logged_in is None:
            return
        self.user = logged_in
        if self.on_player_logged_in is not None:
            self.on_player_logged_in(self)

    def logged_in_elsewhere(self) -> None:
        """Tell the client that its account logged in from another connection."""
        self._client.logged_in_elsewhere()

    def disconnect(self) -> None:
        """Drop the connection without reporting the player as having left."""
        self._client.on_close = None
        self._client.close()


class ServerGame:
    """Tracks connected players and removes the ones that left once per tick."""

    tick_interval = 1.0

    def __init__(self, database: Any, port: int = DEFAULT_PORT) -> None:
        self._database = database
        self._port = port
        self._lock = threading.RLock()
        self._players: list[ServerPlayer] = []
        self._to_remove: deque[ServerPlayer] = deque()
        self.server: Server | None = None
        self._started = False
        self._stopped = False

    @property
    def players(self) -> tuple[ServerPlayer, ...]:
        """The players connected right now."""
        with self._lock:
            return tuple(self._players)

    @property
    def running(self) -> bool:
        """Whether the server is up and the game has not been stopped."""
        return self._started and not self._stopped

    @property
    def port(self) -> int:
        """The port the game server listens on."""
        if self.server is None:
            raise RuntimeError("game is not running")
        return self.server.port

    def add_client(self, client: ConnectedClient | Any) -> ServerPlayer:
        """Create a player for a newly connected client."""
        with self._lock:
            _log.info("New client connected")
            player = ServerPlayer(client, self._database)
            player.on_player_left = self._player_left
            player.on_player_logged_in = self._player_logged_in
            self._players.append(player)
            _log.info("Connected player count: %d", len(self._players))
            return player

    def _player_left(self, player: ServerPlayer) -> None:
        with self._lock:
            self._to_remove.append(player)

    def _player_logged_in(self, player: ServerPlayer) -> None:
        _log.info("Player logged in: %s", player.email)
        with self._lock:
            for other in self._players:
                if other is not player and other.email == player.email:
                    other.logged_in_elsewhere()
                    self._to_remove.append(other)
                    break

    def tick(self) -> None:
        """Drop every player that left or was replaced since the last tick."""
        with self._lock:
            while self._to_remove:
                player = self._to_remove.popleft()
                if not any(p is player for p in self._players):
                    continue
                self._players = [p for p in self._players if p is not player]
                player.disconnect()
                _log.info("Player left, connected player count: %d", len(self._players))

    async def run(self) -> None:
        """Start the server and tick until :meth:`stop` is called."""
        self.server = Server(self._port, self.add_client)
        try:
            await self.server.start()
        except OSError as exc:
            _log.error("Exception: %s", exc)
            self.server = None
            return
        self._started = True
        try:
            while not self._stopped:
                await asyncio.sleep(self.tick_interval)
                self.tick()
        finally:
            await self.server.stop()

    def stop(self) -> None:
        """Ask the tick loop to end."""
        self._stopped = True


def main(argv: list[str] | None = None) -> int:
    """Connect to the database and run the game server."""
    parser = argparse.ArgumentParser(prog="lights-server", description="Run the game server.")
    parser.add_argument("--uri", default=CONNECTION_STRING, help="database connection URI")
    parser.add_argument("--database", default=DATABASE_NAME, help="database name")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    _log.info("Lights version: %d.%d", VERSION_MAJOR, VERSION_MINOR)

    try:
        database = connect(args.uri, args.database)
    except PyMongoError as exc:
        _log.error("An exception occurred: %s", exc)
        return 1

    game = ServerGame(database, args.port)
    try:
        asyncio.run(game.run())
    except KeyboardInterrupt:
        game.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())