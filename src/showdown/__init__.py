"""Five card poker hand evaluation package."""

from showdown.core.card import Card, Rank, Suit
from showdown.core.errors import (
    DegenerateHandError,
    DuplicateCardError,
    InvalidCardError,
    InvalidHandSizeError,
    ShowdownError,
)
from showdown.core.hand import HandValidator, parse_hand
from showdown.evaluation.evaluator import evaluate
from showdown.evaluation.types import Combination, EvaluationResult
from showdown.game.showdown import ShowdownResult, compare_results, resolve_showdown

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "ShowdownError",
    "InvalidCardError",
    "InvalidHandSizeError",
    "DuplicateCardError",
    "DegenerateHandError",
    "HandValidator",
    "parse_hand",
    "evaluate",
    "Combination",
    "EvaluationResult",
    "ShowdownResult",
    "compare_results",
    "resolve_showdown",
]
