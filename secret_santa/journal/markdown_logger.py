"""Markdown journal of an exchange session.

The journal records what happened (roster, how many pairings were drawn, who
looked at their match) but never who anyone is giving to.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from ..roster import GROUPS, Participant


def _table_cell(text: str) -> str:
    return text.replace("|", "\\|")


class MarkdownLogger:
    """Writes exchange events to a markdown file.

    Nothing is written until ``start_session`` has been called.
    """

    STATE_FILE = "exchange_state.md"

    def __init__(self, base_dir: str = "exchanges"):
        """Initialize the logger.

        Args:
            base_dir: Base directory for session journals.
        """
        self.base_dir = Path(base_dir)
        self.session_dir: Optional[Path] = None
        self.session_id: Optional[str] = None

    @property
    def state_file(self) -> Optional[Path]:
        if self.session_dir is None:
            return None
        return self.session_dir / self.STATE_FILE

    def start_session(self, session_id: Optional[str] = None) -> Path:
        """Start journaling a new session.

        Args:
            session_id: Optional session identifier. If not provided, uses timestamp.

        Returns:
            Path to the session directory.
        """
        if session_id is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
            session_id = f"exchange_{timestamp}"

        self.session_id = session_id
        self.session_dir = self.base_dir / session_id
        self.session_dir.mkdir(parents=True, exist_ok=True)

        with open(self.state_file, "w") as f:
            f.write(f"# Secret Santa - {self.session_id}\n\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
            f.write("---\n\n")

        return self.session_dir

    def _append(self, text: str) -> None:
        if self.state_file is None:
            return
        with open(self.state_file, "a") as f:
            f.write(text)

    def log_participant_added(self, participant: Participant) -> None:
        self._append(f"- Added **{participant.name}** ({participant.group})\n")

    def log_participant_removed(self, participant: Participant) -> None:
        self._append(f"- Removed **{participant.name}** ({participant.group})\n")

    def log_roster(self, participants: Sequence[Participant]) -> None:
        """Log the roster the pairings are drawn from.

        Args:
            participants: Participants in roster order.
        """
        lines = ["\n## Roster\n\n", "| Participant | Group |\n", "|-------------|-------|\n"]
        for p in participants:
            lines.append(f"| {_table_cell(p.name)} | {p.group} |\n")
        lines.append("\n")
        self._append("".join(lines))

    def log_pairings_generated(self, counts: dict) -> None:
        """Log that pairings were drawn.

        Args:
            counts: Number of assignments per group.
        """
        lines = ["## Pairings Generated\n\n"]
        for group in GROUPS:
            count = counts.get(group, 0)
            if count:
                lines.append(f"- {group}: {count} assignments\n")
            else:
                lines.append(f"- {group}: *no exchange (fewer than 2 members)*\n")
        lines.append("\n*Matches are kept secret and are not recorded here*\n\n")
        self._append("".join(lines))

    def log_reveal(self, giver_name: str) -> None:
        self._append(f"- {giver_name} viewed their match\n")

    def log_hide(self) -> None:
        self._append("- Match hidden, device passed on\n")

    def log_start_over(self, roster_cleared: bool) -> None:
        self._append("\n---\n\n")
        self._append("## Started Over\n\n")
        if roster_cleared:
            self._append("*Pairings discarded and roster cleared*\n\n")
        else:
            self._append("*Pairings discarded, roster kept*\n\n")

    def log_session_end(self) -> None:
        self._append(f"\n---\n\nEnded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
