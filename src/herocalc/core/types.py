"""Shared type aliases for the core and domain layers."""
from typing import Literal

StatKey = Literal["hp", "atk", "spd", "def", "res"]
Variance = Literal["low", "normal", "high"]
Level = Literal[1, 40]
MitigationType = Literal["def", "res"]

__all__ = ["Level", "MitigationType", "StatKey", "Variance"]
