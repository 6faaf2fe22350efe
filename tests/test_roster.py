"""Tests for roster editing and group partitioning."""
from __future__ import annotations

import pytest

from secret_santa.errors import ValidationError
from secret_santa.roster import Group, Roster, get_group


def test_add_grows_only_the_matching_group() -> None:
    roster = Roster()
    alice = roster.add("Alice", Group.ADULT)
    bob = roster.add("  Bob  ", "Adult")
    dylan = roster.add("Dylan", "kid")

    snapshot = roster.snapshot()
    assert snapshot.adults == (alice, bob)
    assert snapshot.kids == (dylan,)
    assert bob.name == "Bob"
    assert dylan.group is Group.KID

    emma = roster.add("Emma", Group.KID)
    after = roster.snapshot()
    assert after.adults == snapshot.adults
    assert after.kids == (dylan, emma)


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_empty_names_are_rejected_and_roster_unchanged(name: str) -> None:
    roster = Roster()
    roster.add("Alice", Group.ADULT)

    with pytest.raises(ValidationError):
        roster.add(name, Group.ADULT)

    assert [p.name for p in roster] == ["Alice"]


def test_unknown_group_is_rejected() -> None:
    roster = Roster()
    with pytest.raises(ValidationError):
        roster.add("Alice", "Elf")
    assert len(roster) == 0


def test_ids_are_unique() -> None:
    roster = Roster()
    participants = [roster.add("Sam", Group.ADULT) for _ in range(50)]
    assert len({p.id for p in participants}) == 50


def test_remove_by_id_and_unknown_id_is_a_noop() -> None:
    roster = Roster()
    alice = roster.add("Alice", Group.ADULT)
    bob = roster.add("Bob", Group.ADULT)

    assert roster.remove("no-such-id") is None
    assert len(roster) == 2

    assert roster.remove(alice.id) == alice
    assert roster.participants == [bob]
    assert roster.remove(alice.id) is None


def test_insertion_order_is_kept_within_groups() -> None:
    roster = Roster()
    names = [("Zoe", "Adult"), ("Max", "Kid"), ("Ann", "Adult"), ("Bo", "Kid")]
    for name, group in names:
        roster.add(name, group)

    snapshot = roster.partition_by_group()
    assert [p.name for p in snapshot.adults] == ["Zoe", "Ann"]
    assert [p.name for p in snapshot.kids] == ["Max", "Bo"]
    assert [p.name for p in snapshot.participants] == ["Zoe", "Ann", "Max", "Bo"]


def test_can_generate_needs_two_in_one_group() -> None:
    roster = Roster()
    assert not roster.can_generate

    roster.add("Alice", Group.ADULT)
    roster.add("Dylan", Group.KID)
    assert not roster.can_generate
    assert roster.counts() == {Group.ADULT: 1, Group.KID: 1}

    roster.add("Emma", Group.KID)
    assert roster.can_generate


def test_extend_validates_every_entry_first() -> None:
    roster = Roster()
    with pytest.raises(ValidationError):
        roster.extend([{"name": "Alice", "group": "Adult"}, {"name": " ", "group": "Kid"}])
    assert len(roster) == 0

    added = roster.extend([{"name": "Alice", "group": "Adult"}, {"name": "Dylan", "group": "Kid"}])
    assert [p.group for p in added] == [Group.ADULT, Group.KID]


def test_group_parsing_and_counts() -> None:
    assert get_group(" ADULT ") is Group.ADULT
    assert get_group(Group.KID) is Group.KID
    assert str(Group.KID) == "Kid"
    assert Group.ADULT.describe_count(1) == "1 person"
    assert Group.ADULT.describe_count(3) == "3 people"
    assert Group.KID.describe_count(1) == "1 kid"
    assert Group.KID.describe_count(0) == "0 kids"
