"""Hero calculator core: stat resolution and skill inheritance rules."""

__version__ = "0.1.0"
