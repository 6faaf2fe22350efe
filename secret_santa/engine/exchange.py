"""Gift exchange engine - roster, pairing and reveal wired together."""

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from ..journal.markdown_logger import MarkdownLogger
from ..roster import GROUPS, Group, Participant, Roster
from .pairing import PairingEngine, PairingSet
from .reveal import RevealSession


class Screen(Enum):
    """Steps of the exchange flow."""
    SETUP = auto()   # Building the roster
    REVEAL = auto()  # Passing the device around


@dataclass
class ExchangeConfig:
    """Configuration for an exchange."""
    clear_roster_on_start_over: bool = True
    seed: Optional[int] = None


class GiftExchange:
    """A Secret Santa exchange on a single shared device.

    The exchange only keeps the steps in order - the roster decides who takes
    part, the pairing engine draws the matches and the reveal session makes
    sure only one match is ever on screen.
    """

    def __init__(
        self,
        config: Optional[ExchangeConfig] = None,
        logger: Optional[MarkdownLogger] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the exchange.

        Args:
            config: Exchange configuration.
            logger: Optional markdown logger.
            rng: Optional random source, overrides ``config.seed``.
        """
        self.config = config or ExchangeConfig()
        self.logger = logger or MarkdownLogger()
        self.roster = Roster()
        self.engine = PairingEngine(rng=rng, seed=self.config.seed)
        self.session = RevealSession()
        self.screen = Screen.SETUP

    @property
    def pairing_set(self) -> PairingSet:
        return self.session.pairing_set

    @property
    def can_generate(self) -> bool:
        """True when at least one group has two or more members."""
        return self.roster.can_generate

    def add_participant(self, name: str, group: Union[Group, str]) -> Participant:
        """Add a participant to the roster.

        Raises:
            ValidationError: If the name is empty or the group is unknown.
        """
        participant = self.roster.add(name, group)
        self.logger.log_participant_added(participant)
        return participant

    def remove_participant(self, participant_id: str) -> Optional[Participant]:
        """Remove a participant. Unknown ids are ignored."""
        participant = self.roster.remove(participant_id)
        if participant is not None:
            self.logger.log_participant_removed(participant)
        return participant

    def generate(self) -> PairingSet:
        """Draw fresh pairings from the current roster.

        Any previous pairing set is discarded and the reveal session is
        hidden before the new set can be read.
        """
        snapshot = self.roster.snapshot()
        pairing_set = self.engine.generate(snapshot.adults, snapshot.kids)
        self.session.install(pairing_set)
        self.screen = Screen.REVEAL

        self.logger.log_roster(self.roster.participants)
        self.logger.log_pairings_generated(
            {group: len(pairing_set.for_group(group)) for group in GROUPS}
        )
        return pairing_set

    def reveal(self, giver_name: str) -> Optional[str]:
        """Show the receiver's name for a giver's display name."""
        receiver = self.session.show(giver_name)
        if receiver is not None:
            self.logger.log_reveal(giver_name)
        return receiver

    def reveal_participant(self, giver_id: str) -> Optional[Participant]:
        """Show the receiver for a giver id."""
        receiver = self.session.show_participant(giver_id)
        if receiver is not None:
            self.logger.log_reveal(self.session.visible.giver.name)
        return receiver

    def hide(self) -> None:
        """Hide the current match so the device can be passed on."""
        was_revealed = self.session.is_revealed
        self.session.hide()
        if was_revealed:
            self.logger.log_hide()

    def start_over(self) -> None:
        """Discard the pairings and go back to the setup screen."""
        self.session.clear()
        if self.config.clear_roster_on_start_over:
            self.roster.clear()
        self.screen = Screen.SETUP
        self.logger.log_start_over(self.config.clear_roster_on_start_over)
