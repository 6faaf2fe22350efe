"""Pairing generation - who gives a gift to whom."""

import random
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from ..errors import ValidationError
from ..roster import GROUPS, MIN_GROUP_SIZE, Group, Participant


T = TypeVar("T")


class Assignment(BaseModel):
    """A single giver -> receiver link within one group."""

    model_config = ConfigDict(frozen=True)

    giver: Participant
    receiver: Participant

    @property
    def group(self) -> Group:
        return self.giver.group


@dataclass(frozen=True)
class PairingSet:
    """All assignments from one generation run, adults first then kids.

    ``participants`` is the roster as it was when the pairings were drawn, so
    later roster edits never change what a pairing set contains.
    """
    assignments: tuple[Assignment, ...] = ()
    participants: tuple[Participant, ...] = ()
    _by_giver: dict[str, Assignment] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        for assignment in self.assignments:
            self._by_giver[assignment.giver.id] = assignment

    def __len__(self) -> int:
        return len(self.assignments)

    def __iter__(self) -> Iterator[Assignment]:
        return iter(self.assignments)

    @property
    def is_empty(self) -> bool:
        return not self.assignments

    def assignment_for(self, giver_id: str) -> Optional[Assignment]:
        """Get the assignment whose giver has this id."""
        return self._by_giver.get(giver_id)

    def receiver_for(self, giver_id: str) -> Optional[Participant]:
        """Get the receiver for a giver id, or None if they have no assignment."""
        assignment = self.assignment_for(giver_id)
        return assignment.receiver if assignment else None

    def givers_named(self, name: str) -> list[Participant]:
        """All givers whose display name matches ``name``."""
        return [a.giver for a in self.assignments if a.giver.name == name]

    def for_group(self, group: Group) -> list[Assignment]:
        return [a for a in self.assignments if a.group is group]


EMPTY_PAIRING_SET = PairingSet()


class PairingEngine:
    """Draws a random gift cycle inside each group.

    Each group is shuffled uniformly, then every member gives to the next one
    in the shuffled order, wrapping around at the end. Groups never exchange
    with each other.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """Initialize the engine.

        Args:
            rng: Random source. Takes precedence over ``seed``.
            seed: Seed for a private random source, for reproducible draws.
        """
        self.rng = rng or random.Random(seed)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a uniformly shuffled copy of ``items`` (Fisher-Yates)."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def pair_group(
        self,
        members: Sequence[Participant],
        group: Optional[Group] = None,
    ) -> list[Assignment]:
        """Draw the gift cycle for a single group.

        Args:
            members: Participants of one group.
            group: Expected group. Defaults to the first member's group.

        Returns:
            One assignment per member, or an empty list for fewer than two
            members.

        Raises:
            ValidationError: If the members do not all belong to one group.
        """
        if not members:
            return []
        group = group or members[0].group
        strays = [p.name for p in members if p.group is not group]
        if strays:
            raise ValidationError(f"Not in the {group} group: {', '.join(strays)}")

        if len(members) < MIN_GROUP_SIZE:
            return []

        order = self.shuffle(members)
        return [
            Assignment(giver=giver, receiver=order[(i + 1) % len(order)])
            for i, giver in enumerate(order)
        ]

    def generate(
        self,
        adults: Sequence[Participant],
        kids: Sequence[Participant],
    ) -> PairingSet:
        """Draw pairings for both groups.

        Callers are expected to check that at least one group has two or more
        members first; otherwise the result is simply empty.
        """
        members = {Group.ADULT: list(adults), Group.KID: list(kids)}
        assignments: list[Assignment] = []
        for group in GROUPS:
            assignments.extend(self.pair_group(members[group], group))
        return PairingSet(
            assignments=tuple(assignments),
            participants=tuple(members[Group.ADULT] + members[Group.KID]),
        )
