"""Reveal session - showing one participant their match at a time."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..roster import Participant
from .pairing import EMPTY_PAIRING_SET, Assignment, PairingSet


class RevealPhase(Enum):
    """Whether an assignment is on screen."""
    HIDDEN = auto()    # Nothing is shown
    REVEALED = auto()  # Exactly one giver's match is shown


@dataclass(frozen=True)
class RevealState:
    """Current state of the reveal session."""
    phase: RevealPhase = RevealPhase.HIDDEN
    giver_id: Optional[str] = None

    @property
    def is_revealed(self) -> bool:
        return self.phase == RevealPhase.REVEALED


HIDDEN = RevealState()


class RevealSession:
    """Hands out assignments one giver at a time on a shared device.

    At most one assignment is visible at any moment. Showing a second giver
    replaces the first, and installing a new pairing set always returns the
    session to hidden.
    """

    def __init__(self, pairing_set: Optional[PairingSet] = None):
        self.pairing_set: PairingSet = pairing_set or EMPTY_PAIRING_SET
        self.state: RevealState = HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state.is_revealed

    @property
    def revealed_giver_id(self) -> Optional[str]:
        return self.state.giver_id

    @property
    def visible(self) -> Optional[Assignment]:
        """The assignment currently on screen, if any."""
        if not self.state.is_revealed:
            return None
        return self.pairing_set.assignment_for(self.state.giver_id)

    def install(self, pairing_set: PairingSet) -> RevealState:
        """Replace the pairing set. Anything on screen is hidden."""
        self.pairing_set = pairing_set
        return self.reset()

    def clear(self) -> RevealState:
        """Drop the pairing set entirely."""
        return self.install(EMPTY_PAIRING_SET)

    def show_participant(self, giver_id: str) -> Optional[Participant]:
        """Reveal the receiver for a giver id.

        Returns:
            The receiver, or None when the giver has no assignment (the
            session is then hidden).
        """
        assignment = self.pairing_set.assignment_for(giver_id)
        if assignment is None:
            self.reset()
            return None
        self.state = RevealState(phase=RevealPhase.REVEALED, giver_id=giver_id)
        return assignment.receiver

    def show(self, giver_name: str) -> Optional[str]:
        """Reveal the receiver's name for a giver's display name.

        A name that matches no giver, or more than one, shows nothing.
        """
        givers = self.pairing_set.givers_named(giver_name)
        if len(givers) != 1:
            self.reset()
            return None
        receiver = self.show_participant(givers[0].id)
        return receiver.name if receiver else None

    def hide(self) -> RevealState:
        """Hide whatever is on screen."""
        return self.reset()

    def reset(self) -> RevealState:
        """Return to the hidden state."""
        self.state = HIDDEN
        return self.state
