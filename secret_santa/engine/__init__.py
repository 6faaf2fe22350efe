"""Exchange engine - pairing draws, the reveal session and the exchange flow."""

from .pairing import Assignment, PairingEngine, PairingSet
from .reveal import RevealPhase, RevealSession, RevealState
from .exchange import ExchangeConfig, GiftExchange, Screen

__all__ = [
    "Assignment",
    "PairingEngine",
    "PairingSet",
    "RevealPhase",
    "RevealSession",
    "RevealState",
    "ExchangeConfig",
    "GiftExchange",
    "Screen",
]
