"""Secret Santa - private gift exchange pairings on a shared device."""

from .engine import GiftExchange, PairingEngine, PairingSet, RevealSession
from .errors import SecretSantaError, ValidationError
from .roster import Group, Participant, Roster

__all__ = [
    "GiftExchange",
    "PairingEngine",
    "PairingSet",
    "RevealSession",
    "SecretSantaError",
    "ValidationError",
    "Group",
    "Participant",
    "Roster",
]
