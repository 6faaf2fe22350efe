"""Roster management - who is taking part and in which group."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .groups import GROUPS, Group, get_group
from ..errors import ValidationError
from .participant import Participant


MIN_GROUP_SIZE = 2


@dataclass(frozen=True)
class RosterSnapshot:
    """Participants split by group, insertion order preserved."""
    adults: tuple[Participant, ...] = ()
    kids: tuple[Participant, ...] = ()

    def for_group(self, group: Group) -> tuple[Participant, ...]:
        return self.adults if group is Group.ADULT else self.kids

    @property
    def participants(self) -> tuple[Participant, ...]:
        return self.adults + self.kids


class Roster:
    """Ordered set of participants.

    Ids are unique for the lifetime of the roster and a participant's group
    never changes once added.
    """

    def __init__(self, participants: Optional[Iterable[Participant]] = None):
        self._participants: list[Participant] = []
        for participant in participants or ():
            self._append(participant)

    def __len__(self) -> int:
        return len(self._participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(list(self._participants))

    def __contains__(self, participant_id: object) -> bool:
        return self.get(participant_id) is not None

    @property
    def participants(self) -> list[Participant]:
        """All participants in insertion order."""
        return list(self._participants)

    def get(self, participant_id) -> Optional[Participant]:
        """Get a participant by id, or None if absent."""
        return next((p for p in self._participants if p.id == participant_id), None)

    def add(self, name: str, group: Union[Group, str]) -> Participant:
        """Add a participant.

        Args:
            name: Display name. Surrounding whitespace is stripped.
            group: A Group or its name ("Adult" / "Kid").

        Returns:
            The new participant, with a freshly generated id.

        Raises:
            ValidationError: If the name is empty or the group is unknown.
                The roster is left unchanged.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Participant name must not be empty")
        participant = Participant(name=name, group=get_group(group))
        return self._append(participant)

    def extend(self, entries: Iterable[dict]) -> list[Participant]:
        """Add several participants from ``{"name": ..., "group": ...}`` entries.

        Every entry is validated before any is added.
        """
        pending = []
        for entry in entries:
            name = entry.get("name") if isinstance(entry, dict) else None
            if not isinstance(name, str) or not name.strip():
                raise ValidationError(f"Participant entry needs a name: {entry!r}")
            pending.append(Participant(name=name, group=get_group(entry.get("group", Group.ADULT))))
        return [self._append(p) for p in pending]

    def remove(self, participant_id) -> Optional[Participant]:
        """Remove a participant by id. Unknown ids are ignored.

        Returns:
            The removed participant, or None if no participant matched.
        """
        participant = self.get(participant_id)
        if participant is not None:
            self._participants.remove(participant)
        return participant

    def clear(self) -> None:
        """Remove every participant."""
        self._participants.clear()

    def snapshot(self) -> RosterSnapshot:
        """Split the roster into adults and kids."""
        return RosterSnapshot(
            adults=tuple(p for p in self._participants if p.group is Group.ADULT),
            kids=tuple(p for p in self._participants if p.group is Group.KID),
        )

    partition_by_group = snapshot

    def counts(self) -> dict[Group, int]:
        """Number of participants per group."""
        snapshot = self.snapshot()
        return {group: len(snapshot.for_group(group)) for group in GROUPS}

    @property
    def can_generate(self) -> bool:
        """True when at least one group is large enough to exchange gifts."""
        return any(count >= MIN_GROUP_SIZE for count in self.counts().values())

    def _append(self, participant: Participant) -> Participant:
        if participant.id in self:
            raise ValidationError(f"Duplicate participant id: {participant.id}")
        self._participants.append(participant)
        return participant
