"""Main entry point for the Secret Santa exchange."""

import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from .engine.exchange import ExchangeConfig, GiftExchange, Screen
from .errors import ConfigError, ValidationError
from .journal.markdown_logger import MarkdownLogger
from .roster import GROUPS, Participant


# Load environment variables
load_dotenv()

console = Console()

DEFAULT_CONFIG_PATH = "config/exchange.yaml"
NOT_ENOUGH_PEOPLE = "Add at least 2 people in one group to generate pairings"


def load_config(config_path: str = DEFAULT_CONFIG_PATH, required: bool = True) -> dict:
    """Load exchange configuration from a YAML file.

    Args:
        config_path: Path to the YAML file.
        required: Exit when the file is missing; otherwise fall back to an
            empty configuration.
    """
    path = Path(config_path)
    if not path.exists():
        if required:
            console.print(f"[red]Config file not found: {config_path}[/red]")
            sys.exit(1)
        return {}

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")
    return data


def _section(config_data: dict, name: str) -> dict:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' section must be a mapping")
    return section


def build_config(config_data: dict) -> ExchangeConfig:
    """Build the exchange configuration.

    ``SECRET_SANTA_SEED`` in the environment overrides ``exchange.seed``.
    """
    section = _section(config_data, "exchange")

    clear_roster = section.get("clear_roster_on_start_over", True)
    if not isinstance(clear_roster, bool):
        raise ConfigError("exchange.clear_roster_on_start_over must be true or false")

    seed = os.getenv("SECRET_SANTA_SEED") or section.get("seed")
    if isinstance(seed, bool):
        raise ConfigError(f"Seed must be an integer, got {seed!r}")
    if seed is not None:
        try:
            seed = int(seed)
        except (TypeError, ValueError):
            raise ConfigError(f"Seed must be an integer, got {seed!r}") from None

    return ExchangeConfig(clear_roster_on_start_over=clear_roster, seed=seed)


def build_logger(config_data: dict) -> MarkdownLogger:
    """Create the session journal, started if journaling is enabled."""
    section = _section(config_data, "journal")

    enabled = section.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigError("journal.enabled must be true or false")
    base_dir = section.get("base_dir", "exchanges")
    if not isinstance(base_dir, str) or not base_dir.strip():
        raise ConfigError("journal.base_dir must be a directory path")

    logger = MarkdownLogger(base_dir=base_dir)
    if enabled:
        logger.start_session()
    return logger


def seed_roster(exchange: GiftExchange, config_data: dict) -> list[Participant]:
    """Add the participants listed in the configuration."""
    entries = config_data.get("participants") or []
    if not isinstance(entries, list):
        raise ConfigError("'participants' must be a list")
    try:
        added = exchange.roster.extend(entries)
    except ValidationError as e:
        raise ConfigError(f"Invalid participant in config: {e}") from e
    for participant in added:
        exchange.logger.log_participant_added(participant)
    return added


def display_welcome():
    """Display welcome message."""
    console.print(Panel.fit(
        "[bold red]SECRET SANTA[/bold red]\n"
        "[dim]Create magical gift exchanges with complete privacy[/dim]",
        border_style="red",
    ))
    console.print()


def numbered_roster(exchange: GiftExchange) -> list[Participant]:
    """Participants in display order (adults, then kids)."""
    return list(exchange.roster.snapshot().participants)


def display_roster(exchange: GiftExchange):
    """Display both groups with their list numbers."""
    snapshot = exchange.roster.snapshot()
    number = 1
    for group in GROUPS:
        members = snapshot.for_group(group)
        table = Table(
            title=f"{group.heading} ({group.describe_count(len(members))})",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("#", style="dim", justify="right")
        table.add_column("Name", style="cyan")

        if not members:
            table.add_row("", f"[dim]No {group.heading.lower()} added yet[/dim]")
        for participant in members:
            table.add_row(str(number), escape(participant.name))
            number += 1

        console.print(table)
    console.print()


def run_setup(exchange: GiftExchange) -> bool:
    """Handle one setup screen command. Returns False to quit."""
    display_roster(exchange)
    if not exchange.can_generate:
        console.print(f"[dim]{NOT_ENOUGH_PEOPLE}[/dim]")

    action = Prompt.ask(
        "[bold]\\[a]dd, \\[r]emove, \\[g]enerate pairings, \\[q]uit[/bold]",
        choices=["a", "r", "g", "q"],
        default="a",
    )

    if action == "a":
        name = Prompt.ask("Name")
        group = Prompt.ask("Group", choices=[g.value for g in GROUPS], default="Adult")
        try:
            participant = exchange.add_participant(name, group)
            console.print(f"[green]Added {escape(participant.name)} ({participant.group})[/green]")
        except ValidationError as e:
            console.print(f"[red]{escape(str(e))}[/red]")

    elif action == "r":
        participants = numbered_roster(exchange)
        if not participants:
            console.print("[yellow]Nobody to remove.[/yellow]")
            return True
        number = IntPrompt.ask("Number to remove")
        if 1 <= number <= len(participants):
            removed = exchange.remove_participant(participants[number - 1].id)
            console.print(f"[yellow]Removed {escape(removed.name)}[/yellow]")
        else:
            console.print(f"[red]No participant number {number}[/red]")

    elif action == "g":
        if not exchange.can_generate:
            console.print(f"[red]{NOT_ENOUGH_PEOPLE}[/red]")
            return True
        exchange.generate()
        console.clear()

    elif action == "q":
        return False

    return True


def reveal_match(exchange: GiftExchange, giver: Participant):
    """Show one giver their match, then hide it once they are done."""
    receiver = exchange.reveal_participant(giver.id)
    try:
        if receiver is None:
            console.print(Panel(
                f"{escape(giver.name)}, there is no match for you this time.\n"
                "[dim]Your group needs at least 2 people to exchange gifts.[/dim]",
                border_style="yellow",
            ))
        else:
            console.print(Panel(
                f"{escape(giver.name)}, you're giving a gift to:\n\n"
                f"[bold red]{escape(receiver.name)}[/bold red]",
                border_style="green",
            ))

        console.input("[yellow]Press Enter to hide (pass to next person)...[/yellow]")
    finally:
        # The match must leave the screen even on Ctrl-C
        exchange.hide()
        console.clear()


def run_reveal(exchange: GiftExchange) -> bool:
    """Handle one reveal screen command. Returns False to quit."""
    console.print(Panel.fit(
        "[bold]Secret Santa Reveal[/bold]\n"
        "Pass the device around. Each person picks their name to see their match privately.",
        border_style="green",
    ))

    participants = list(exchange.pairing_set.participants)
    table = Table(title="Pick Your Name", show_header=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    for number, participant in enumerate(participants, start=1):
        table.add_row(str(number), escape(participant.name))
    console.print(table)

    choices = [str(n) for n in range(1, len(participants) + 1)] + ["s", "q"]
    action = Prompt.ask("[bold]Your number, \\[s]tart over or \\[q]uit[/bold]", choices=choices)

    if action == "q":
        return False
    if action == "s":
        exchange.start_over()
        console.clear()
        return True

    reveal_match(exchange, participants[int(action) - 1])
    return True


def main():
    """Main entry point."""
    display_welcome()

    # Config path: argument, then environment, then the default location
    config_path = (
        sys.argv[1] if len(sys.argv) > 1
        else os.getenv("SECRET_SANTA_CONFIG", DEFAULT_CONFIG_PATH)
    )
    explicit = len(sys.argv) > 1 or "SECRET_SANTA_CONFIG" in os.environ
    console.print(f"[dim]Loading config from: {config_path}[/dim]")

    try:
        config_data = load_config(config_path, required=explicit)
        exchange = GiftExchange(config=build_config(config_data), logger=build_logger(config_data))
        seed_roster(exchange, config_data)
    except ConfigError as e:
        console.print(f"[red]Error in config: {escape(str(e))}[/red]")
        sys.exit(1)

    if exchange.logger.session_dir:
        console.print(f"[dim]Session journal: {exchange.logger.session_dir}[/dim]")
    console.print()

    try:
        running = True
        while running:
            if exchange.screen == Screen.SETUP:
                running = run_setup(exchange)
            else:
                running = run_reveal(exchange)
    except KeyboardInterrupt:
        console.print("\n[yellow]Exchange interrupted by user.[/yellow]")
        sys.exit(0)
    finally:
        exchange.hide()
        exchange.logger.log_session_end()

    console.print("[green]Happy gifting![/green]")


def run():
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run()
