"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a hero instance cannot be created."""


class InvalidInstanceError(ValueError):
    """Raised when a hero instance violates its own invariants (e.g. boon equals bane)."""


class MissingStatError(LookupError):
    """Raised when the dataset has no base stat for a requested level, rarity and stat."""


class UnknownRestrictionError(Exception):
    """Raised in strict mode when a skill carries an unrecognized inherit restriction."""
