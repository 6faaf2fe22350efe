"""Participant groups for the gift exchange."""

from enum import Enum

from ..errors import ValidationError


class Group(str, Enum):
    """One of the two disjoint exchange groups."""

    ADULT = "Adult"
    KID = "Kid"

    def __str__(self) -> str:
        return self.value

    @property
    def noun(self) -> str:
        """Singular display noun used in roster counts."""
        return "person" if self is Group.ADULT else "kid"

    @property
    def plural(self) -> str:
        return "people" if self is Group.ADULT else "kids"

    @property
    def heading(self) -> str:
        """Section heading, e.g. "Adults"."""
        return f"{self.value}s"

    def describe_count(self, count: int) -> str:
        """Format a member count, e.g. "1 person" or "3 kids"."""
        return f"{count} {self.noun if count == 1 else self.plural}"


# Groups in the order their pairings are generated
GROUPS = (Group.ADULT, Group.KID)


def get_group(value) -> Group:
    """Get a group from a Group or a case-insensitive name."""
    if isinstance(value, Group):
        return value
    if isinstance(value, str):
        for group in GROUPS:
            if group.value.lower() == value.strip().lower():
                return group
    raise ValidationError(
        f"Unknown group: {value!r}. Available: {[g.value for g in GROUPS]}"
    )
