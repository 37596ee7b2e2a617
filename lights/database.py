"""User accounts stored in a document database."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError

from lights.crypto import generate_salt, hash_password, verify_password

__all__ = ["CONNECTION_STRING", "DATABASE_NAME", "SALT_LENGTH", "User", "Database", "connect"]

CONNECTION_STRING = "mongodb://localhost:27017"
DATABASE_NAME = "lights"
SALT_LENGTH = 32

_log = logging.getLogger(__name__)


@dataclass
class User:
    """A player account."""

    name: str = ""
    email: str = ""
    password: str = ""
    salt: str = ""
    logged_in: bool = False

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> User:
        """Build a user from a stored document."""
        return cls(
            name=document["name"],
            email=document["email"],
            password=document["password"],
            salt=document["salt"],
            logged_in=bool(document["bLoggedIn"]),
        )

    def to_document(self) -> dict[str, Any]:
        """Return the user as a document to store."""
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "salt": self.salt,
            "bLoggedIn": self.logged_in,
        }


class Database:
    """Account storage on top of a database that has a ``users`` collection."""

    def __init__(self, database: Any) -> None:
        self._database = database

    @property
    def _users(self) -> Any:
        return self._database["users"]

    def migrate(self, default_user: User | None = None) -> None:
        """Make e-mail addresses unique and create ``default_user`` if it is missing."""
        self._users.create_index([("email", ASCENDING)], unique=True)
        if default_user is not None and self.find_user(default_user.email) is None:
            _log.info("Creating default user")
            self.create_user(default_user)

    def find_user(self, email: str) -> User | None:
        """Return the user with ``email``, or None."""
        document = self._users.find_one({"email": email})
        if document is None:
            return None
        return User.from_document(document)

    def create_user(self, user: User) -> bool:
        """Salt and hash ``user``'s password in place and store the user.

        Returns False if the database refuses the insert.
        """
        user.salt = generate_salt(SALT_LENGTH)
        user.password = hash_password(user.salt + user.password)
        try:
            result = self._users.insert_one(user.to_document())
        except PyMongoError as exc:
            _log.error("An exception occurred: %s", exc)
            return False
        if not result.acknowledged:
            _log.error("Failed to insert user")
            return False
        return True

    def login_user(self, email: str, password: str) -> User | None:
        """Check the credentials and mark the user logged in; None if they are wrong."""
        user = self.find_user(email)
        if user is None or not verify_password(user.salt + password, user.password):
            return None
        user.logged_in = True
        result = self._users.update_one(
            {"email": email}, {"$set": {"bLoggedIn": True}}
        )
        if not result.acknowledged:
            _log.error("Failed to update user login status")
            return None
        return user

    def logout_user(self, email: str) -> None:
        """Mark the user with ``email`` logged out."""
        result = self._users.update_one(
            {"email": email}, {"$set": {"bLoggedIn": False}}
        )
        if not result.acknowledged:
            _log.error("Failed to update user login status")


def connect(uri: str = CONNECTION_STRING, database_name: str = DATABASE_NAME) -> Database:
    """Connect to the server at ``uri``, check it answers and prepare the database."""
    client: MongoClient = MongoClient(uri)
    reply = client["admin"].command("ping")
    _log.info("Pinged deployment: %s", reply)
    database = Database(client[database_name])
    database.migrate()
    return database