"""Exceptions raised while loading hero and skill definitions."""


class DataError(Exception):
    """Base exception for the definitions layer."""


class DataLoadError(DataError):
    """A definitions file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """A definitions file parsed but its content does not match the expected schema."""
