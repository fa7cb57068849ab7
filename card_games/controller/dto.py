"""Data transfer objects for the user registry.

Pydantic dataclasses validate the registry file on import and give the
export its JSON shape.
"""

from datetime import datetime
from typing import List

from pydantic import Field, TypeAdapter, field_validator, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass


@pydantic_dataclass
class UserRecord:
    """Statistics kept for one registered user."""
    username: str = Field(..., min_length=1, description="Unique username")
    games_played: int = Field(0, ge=0, description="Games finished")
    games_won: int = Field(0, ge=0, description="Games won")

    @field_validator('username')
    @classmethod
    def strip_username(cls, v: str) -> str:
        """Reject usernames made of whitespace only."""
        if not v.strip():
            raise ValueError("username cannot be blank")
        return v.strip()

    @model_validator(mode='after')
    def check_wins_within_played(self) -> 'UserRecord':
        """A user cannot have won more games than they played."""
        if self.games_won > self.games_played:
            raise ValueError(
                f"games_won ({self.games_won}) exceeds games_played ({self.games_played})")
        return self


@pydantic_dataclass
class RegistrySnapshot:
    """The whole registry as written to disk."""
    users: List[UserRecord] = Field(default_factory=list, description="Registered users")
    exported_at: datetime = Field(default_factory=datetime.now, description="Export time")

    @model_validator(mode='after')
    def check_unique_usernames(self) -> 'RegistrySnapshot':
        names = [user.username for user in self.users]
        if len(names) != len(set(names)):
            raise ValueError("duplicate usernames in registry")
        return self


REGISTRY_ADAPTER = TypeAdapter(RegistrySnapshot)


def dump_registry(snapshot: RegistrySnapshot) -> str:
    """Serialise a registry snapshot to JSON text."""
    return REGISTRY_ADAPTER.dump_json(snapshot, indent=2).decode('utf-8')


def load_registry(text: str) -> RegistrySnapshot:
    """Parse and validate registry JSON text.

    Raises:
        pydantic.ValidationError: when the text is not a valid registry
    """
    return REGISTRY_ADAPTER.validate_json(text)
