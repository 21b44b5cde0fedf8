"""Main poker hand evaluation interface."""
import logging
from typing import Iterable, List, Sequence

from showdown.core.card import Card
from showdown.core.hand import CardLike, HandValidator, parse_hand
from showdown.evaluation.combinations import MATCHERS, high_card
from showdown.evaluation.types import EvaluationResult

logger = logging.getLogger(__name__)


def sort_hand(cards: Iterable[Card]) -> List[Card]:
    """Return a new list of cards ordered from highest to lowest rank."""
    return sorted(cards, key=lambda card: card.score, reverse=True)


def classify(sorted_hand: Sequence[Card]) -> EvaluationResult:
    """
    Run the matchers over a hand already sorted by descending rank.

    Returns:
        The first matching combination, or the high card result
    """
    for matcher in MATCHERS:
        result = matcher(sorted_hand)
        if result is not None:
            return result
    return high_card(sorted_hand)


def evaluate(
        cards: Iterable[CardLike],
        reject_degenerate: bool = True
    ) -> EvaluationResult:
    """
    Evaluate a five card poker hand.

    Args:
        cards: Cards, (rank, suit) pairs or strings such as 'KH'
        reject_degenerate: Refuse hands whose cards all share one rank

    Returns:
        Combination and score of the hand

    Raises:
        InvalidCardError: If a card cannot be built
        InvalidHandSizeError: If the hand does not hold five cards
        DuplicateCardError: If a card appears twice
        DegenerateHandError: If every card has the same rank
    """
    hand = parse_hand(cards)
    HandValidator(reject_degenerate=reject_degenerate).validate(hand)

    result = classify(sort_hand(hand))
    logger.debug(
        f"Evaluated {' '.join(str(c) for c in hand)}: "
        f"{result.combination} (score {result.score})"
    )
    return result
