"""
User registry.

Keeps per-user games played and games won, and persists them as JSON.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from ..core.exceptions import UserAlreadyExistsError, UserNotFoundError
from .dto import RegistrySnapshot, UserRecord, dump_registry, load_registry

__all__ = ['UserManager']

PathLike = Union[str, Path]


class UserManager:
    """
    Registry of known users and their statistics.

    All mutations go through a re-entrant lock.
    """

    def __init__(self, records: Optional[List[UserRecord]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialise the registry.

        Args:
            records: initial user records
            logger: logger, defaults to the module logger
        """
        self._users: Dict[str, UserRecord] = {}
        self._lock = threading.RLock()
        self._logger = logger or logging.getLogger(__name__)

        for record in records or []:
            if record.username in self._users:
                raise UserAlreadyExistsError(record.username)
            self._users[record.username] = record

    def add_user(self, username: str) -> UserRecord:
        """
        Register a new user with zeroed statistics.

        Raises:
            UserAlreadyExistsError: when the username is taken
            pydantic.ValidationError: when the username is blank
        """
        record = UserRecord(username=username)
        with self._lock:
            if record.username in self._users:
                raise UserAlreadyExistsError(record.username)
            self._users[record.username] = record
        self._logger.info(f"Registered user {record.username}")
        return record

    def has_user(self, username: str) -> bool:
        with self._lock:
            return username in self._users

    def get_user(self, username: str) -> UserRecord:
        """
        Look a user up.

        Raises:
            UserNotFoundError: when the username is not registered
        """
        with self._lock:
            try:
                return self._users[username]
            except KeyError:
                raise UserNotFoundError(username)

    def add_games_played(self, username: str, delta: int = 1) -> int:
        """
        Adjust a user's games-played counter.

        Returns:
            int: the new count

        Raises:
            UserNotFoundError: when the username is not registered
            ValueError: when the counter would drop below games won or zero
        """
        with self._lock:
            record = self.get_user(username)
            new_value = record.games_played + delta
            if new_value < 0 or new_value < record.games_won:
                raise ValueError(
                    f"games_played for {username} cannot become {new_value}")
            record.games_played = new_value
            return new_value

    def add_games_won(self, username: str, delta: int = 1) -> int:
        """
        Adjust a user's games-won counter.

        Returns:
            int: the new count

        Raises:
            UserNotFoundError: when the username is not registered
            ValueError: when the counter would go negative or above games played
        """
        with self._lock:
            record = self.get_user(username)
            new_value = record.games_won + delta
            if new_value < 0 or new_value > record.games_played:
                raise ValueError(
                    f"games_won for {username} cannot become {new_value}")
            record.games_won = new_value
            return new_value

    def usernames(self) -> List[str]:
        """Registered usernames in registration order."""
        with self._lock:
            return list(self._users)

    def snapshot(self) -> RegistrySnapshot:
        """Copy of the registry suitable for export."""
        with self._lock:
            users = [
                UserRecord(username=r.username, games_played=r.games_played, games_won=r.games_won)
                for r in self._users.values()
            ]
        return RegistrySnapshot(users=users)

    def export_users(self, path: PathLike) -> Path:
        """
        Write the registry to a JSON file.

        When the requested file cannot be written, a timestamped
        users_<YYYYmmdd_HHMMSS>.json is written next to it instead (or in
        the working directory when its folder is unusable).

        Args:
            path: target file

        Returns:
            Path: the file actually written
        """
        text = dump_registry(self.snapshot())
        target = Path(path)
        try:
            target.write_text(text, encoding='utf-8')
            self._logger.info(f"Exported {len(self)} users to {target}")
            return target
        except OSError as e:
            self._logger.warning(f"Could not write registry to {target}: {e}")

        fallback_name = f"users_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        for folder in (target.parent, Path.cwd()):
            fallback = folder / fallback_name
            try:
                fallback.write_text(text, encoding='utf-8')
                self._logger.warning(f"Registry written to fallback file {fallback}")
                return fallback
            except OSError as e:
                self._logger.warning(f"Could not write fallback registry {fallback}: {e}")
        raise OSError(f"Unable to export user registry to {target} or a fallback file")

    @classmethod
    def import_users(cls, path: PathLike, logger: Optional[logging.Logger] = None) -> 'UserManager':
        """
        Load a registry from a JSON file.

        A missing, unreadable or invalid file yields an empty registry.

        Args:
            path: registry file
            logger: logger for the new registry

        Returns:
            UserManager: the loaded registry
        """
        logger = logger or logging.getLogger(__name__)
        source = Path(path)
        try:
            snapshot = load_registry(source.read_text(encoding='utf-8'))
        except FileNotFoundError:
            logger.warning(f"Registry file {source} not found, starting with an empty registry")
            return cls(logger=logger)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Could not load registry from {source}: {e}")
            return cls(logger=logger)

        logger.info(f"Loaded {len(snapshot.users)} users from {source}")
        return cls(snapshot.users, logger=logger)

    def __contains__(self, username: object) -> bool:
        return self.has_user(username)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
