"""
Card game error taxonomy.

Rule violations by a player are not errors: variants re-prompt instead.
These exceptions cover programming faults, bad configuration and registry
bookkeeping problems.
"""


class CardGameError(Exception):
    """Base class for all card game errors"""
    pass


class EmptyDeckError(CardGameError, IndexError):
    """A card was drawn from an empty deck"""
    pass


class InvalidCardError(CardGameError, ValueError):
    """A card token could not be parsed"""
    pass


class UnknownVariantError(CardGameError):
    """The variant factory was given a name it does not know"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown game variant: {name!r}")


class GameConfigError(CardGameError):
    """Invalid roster or configuration values"""
    pass


class UserRegistryError(CardGameError):
    """Base class for user registry errors"""

    def __init__(self, username: str, message: str):
        self.username = username
        super().__init__(message)


class UserAlreadyExistsError(UserRegistryError):
    """The username is already registered"""

    def __init__(self, username: str):
        super().__init__(username, f"User already exists: {username}")


class UserNotFoundError(UserRegistryError):
    """The username is not registered"""

    def __init__(self, username: str):
        super().__init__(username, f"User not found: {username}")
