"""Roster of exchange participants and their groups."""

from .groups import Group, GROUPS, get_group
from .participant import Participant
from .manager import Roster, RosterSnapshot, MIN_GROUP_SIZE

__all__ = [
    "Group",
    "GROUPS",
    "get_group",
    "Participant",
    "Roster",
    "RosterSnapshot",
    "MIN_GROUP_SIZE",
]
