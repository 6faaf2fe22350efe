"""Tests for the session journal."""
from __future__ import annotations

from pathlib import Path

from secret_santa.engine.exchange import GiftExchange
from secret_santa.journal import MarkdownLogger


def test_nothing_is_written_before_the_session_starts(tmp_path: Path) -> None:
    logger = MarkdownLogger(base_dir=str(tmp_path / "exchanges"))
    exchange = GiftExchange(logger=logger)
    exchange.add_participant("Alice", "Adult")
    exchange.add_participant("Bob", "Adult")
    exchange.generate()
    exchange.reveal("Alice")

    assert logger.state_file is None
    assert not (tmp_path / "exchanges").exists()


def test_journal_records_events_but_not_matches(tmp_path: Path) -> None:
    logger = MarkdownLogger(base_dir=str(tmp_path))
    session_dir = logger.start_session("party")
    assert session_dir == tmp_path / "party"

    exchange = GiftExchange(logger=logger)
    for name in ["Alice", "Bob", "Carol"]:
        exchange.add_participant(name, "Adult")
    dylan = exchange.add_participant("Dylan", "Kid")
    exchange.remove_participant(dylan.id)
    exchange.generate()
    exchange.reveal("Alice")
    exchange.hide()
    exchange.start_over()
    logger.log_session_end()

    text = (session_dir / "exchange_state.md").read_text()
    assert text.startswith("# Secret Santa - party")
    assert "- Added **Dylan** (Kid)" in text
    assert "- Removed **Dylan** (Kid)" in text
    assert "| Carol | Adult |" in text
    assert "- Adult: 3 assignments" in text
    assert "- Kid: *no exchange (fewer than 2 members)*" in text
    assert "- Alice viewed their match\n" in text
    assert "- Match hidden, device passed on" in text
    assert "## Started Over" in text
    assert "Ended:" in text

    assert "->" not in text
    assert "giving a gift" not in text


def test_failed_reveal_is_not_journaled(tmp_path: Path) -> None:
    logger = MarkdownLogger(base_dir=str(tmp_path))
    logger.start_session("quiet")
    exchange = GiftExchange(logger=logger)
    exchange.add_participant("Alice", "Adult")
    exchange.generate()
    exchange.reveal("Alice")
    exchange.hide()

    text = logger.state_file.read_text()
    assert "viewed their match" not in text
    assert "Match hidden" not in text


def test_pipes_in_names_keep_the_roster_table_intact(tmp_path: Path) -> None:
    logger = MarkdownLogger(base_dir=str(tmp_path))
    logger.start_session("pipes")
    exchange = GiftExchange(logger=logger)
    exchange.add_participant("Ann|Marie", "Adult")
    exchange.add_participant("Bob", "Adult")
    exchange.generate()

    text = logger.state_file.read_text()
    assert "| Ann\\|Marie | Adult |" in text
    assert "| Ann|Marie |" not in text
