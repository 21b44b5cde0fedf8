"""Integration tests for the command-line interface."""

import logging

import pytest
from click.testing import CliRunner

from showdown_api.cli import cli


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; put it back afterwards."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_evaluate_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", "testing", "evaluate", "AH", "KH", "QH", "JH", "10H"])
    assert result.exit_code == 0
    assert "RoyalFlush: Royal Flush" in result.output


def test_compare_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", "testing", "compare", "3H 3S 3D 7H 7S", "AH,AS,KD,QC,JH"])
    assert result.exit_code == 0
    assert "Player 1 wins with FullHouse. Player 2 had Pair." in result.output
    assert "Player 2: Pair of Aces" in result.output


def test_invalid_hand_reports_error():
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", "testing", "evaluate", "AH", "KH", "QH"])
    assert result.exit_code == 1
    assert "exactly 5 cards" in result.output
