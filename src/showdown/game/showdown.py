"""Two-player showdown: evaluate both hands and report the winner."""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from showdown.core.hand import CardLike
from showdown.evaluation.evaluator import evaluate
from showdown.evaluation.hand_description import describe
from showdown.evaluation.types import Combination, EvaluationResult

logger = logging.getLogger(__name__)


def compare_results(first: EvaluationResult, second: EvaluationResult) -> int:
    """Return 1 if first wins, -1 if second wins, 0 on a tie."""
    if first.score > second.score:
        return 1
    if first.score < second.score:
        return -1
    return 0


@dataclass(frozen=True)
class ShowdownResult:
    """Outcome of comparing two hands."""

    player1: EvaluationResult
    player2: EvaluationResult
    winner: Optional[int]  # 1, 2, or None for a tie

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @property
    def message(self) -> str:
        """Narrate the outcome, e.g. 'Player 1 wins with Pair. Player 2 had HighCard.'"""
        if self.winner is None:
            return f"Both players had even hands with {self.player1.combination}."

        if self.winner == 1:
            won, lost, loser = self.player1, self.player2, 2
        else:
            won, lost, loser = self.player2, self.player1, 1

        # Same category means a kicker decided it
        kicker_note = ""
        if won.combination == lost.combination:
            kicker_note = f" and {Combination.HIGH_CARD}"

        return (
            f"Player {self.winner} wins with {won.combination}{kicker_note}. "
            f"Player {loser} had {lost.combination}."
        )

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "winner": self.winner,
            "message": self.message,
            "player1": {**self.player1.to_json(), "description": describe(self.player1)},
            "player2": {**self.player2.to_json(), "description": describe(self.player2)},
        }


def resolve_showdown(
        hand1: Iterable[CardLike],
        hand2: Iterable[CardLike],
        reject_degenerate: bool = True
    ) -> ShowdownResult:
    """
    Evaluate two hands and decide which one wins.

    Args:
        hand1: Player 1's five cards
        hand2: Player 2's five cards
        reject_degenerate: Hand validation policy passed to evaluate()

    Raises:
        ShowdownError: If either hand is invalid
    """
    result1 = evaluate(hand1, reject_degenerate=reject_degenerate)
    result2 = evaluate(hand2, reject_degenerate=reject_degenerate)

    outcome = compare_results(result1, result2)
    winner = {1: 1, -1: 2}.get(outcome)

    showdown = ShowdownResult(player1=result1, player2=result2, winner=winner)
    logger.info(showdown.message)
    return showdown
