"""Human-readable descriptions for evaluated poker hands."""
from typing import Callable, Dict

from showdown.core.card import Rank
from showdown.evaluation.types import Combination, EvaluationResult

RANK_NAMES: Dict[Rank, str] = {
    Rank.TWO: 'Two',
    Rank.THREE: 'Three',
    Rank.FOUR: 'Four',
    Rank.FIVE: 'Five',
    Rank.SIX: 'Six',
    Rank.SEVEN: 'Seven',
    Rank.EIGHT: 'Eight',
    Rank.NINE: 'Nine',
    Rank.TEN: 'Ten',
    Rank.JACK: 'Jack',
    Rank.QUEEN: 'Queen',
    Rank.KING: 'King',
    Rank.ACE: 'Ace',
}


def full_name(rank: Rank) -> str:
    return RANK_NAMES[rank]


def plural_name(rank: Rank) -> str:
    """'Sixes' for six, 'Aces' for ace."""
    name = RANK_NAMES[rank]
    return f"{name}es" if name.endswith('x') else f"{name}s"


def _describe_high_card(result: EvaluationResult) -> str:
    return f"{full_name(result.ranks[0])} High"


def _describe_pair(result: EvaluationResult) -> str:
    return f"Pair of {plural_name(result.ranks[0])}"


def _describe_two_pairs(result: EvaluationResult) -> str:
    return f"Two Pairs, {plural_name(result.ranks[0])} and {plural_name(result.ranks[1])}"


def _describe_three_of_a_kind(result: EvaluationResult) -> str:
    return f"Three {plural_name(result.ranks[0])}"


def _describe_straight(result: EvaluationResult) -> str:
    return f"{full_name(result.ranks[0])}-high Straight"


def _describe_flush(result: EvaluationResult) -> str:
    return f"{full_name(result.ranks[0])}-high Flush"


def _describe_full_house(result: EvaluationResult) -> str:
    return f"Full House, {plural_name(result.ranks[0])} over {plural_name(result.ranks[1])}"


def _describe_four_of_a_kind(result: EvaluationResult) -> str:
    return f"Four {plural_name(result.ranks[0])}"


def _describe_straight_flush(result: EvaluationResult) -> str:
    return f"{full_name(result.ranks[0])}-high Straight Flush"


def _describe_royal_flush(result: EvaluationResult) -> str:
    return "Royal Flush"


DESCRIBERS: Dict[Combination, Callable[[EvaluationResult], str]] = {
    Combination.HIGH_CARD: _describe_high_card,
    Combination.PAIR: _describe_pair,
    Combination.TWO_PAIRS: _describe_two_pairs,
    Combination.THREE_OF_A_KIND: _describe_three_of_a_kind,
    Combination.STRAIGHT: _describe_straight,
    Combination.FLUSH: _describe_flush,
    Combination.FULL_HOUSE: _describe_full_house,
    Combination.FOUR_OF_A_KIND: _describe_four_of_a_kind,
    Combination.STRAIGHT_FLUSH: _describe_straight_flush,
    Combination.ROYAL_FLUSH: _describe_royal_flush,
}


def describe(result: EvaluationResult) -> str:
    """
    Describe an evaluated hand, e.g. 'Full House, Threes over Sevens'.

    Falls back to the category name when the result carries no ranks.
    """
    if not result.ranks:
        return result.combination.display_name
    return DESCRIBERS[result.combination](result)
