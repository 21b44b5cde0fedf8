"""
Combination matchers for five card hands.

Every matcher takes a hand sorted by descending rank and returns an
EvaluationResult for its category, or None when the hand does not fit.
Matchers are listed in MATCHERS from strongest to weakest; the first hit
wins and high_card() covers everything else.
"""
from collections import Counter
from typing import Callable, List, Optional, Sequence, Tuple

from showdown.core.card import Card, Rank
from showdown.evaluation.constants import (
    ACE_LOW_SCORE,
    RANK_WEIGHT_BASE,
    ROYAL_RANKS,
    WHEEL_RANKS,
)
from showdown.evaluation.types import Combination, EvaluationResult

Matcher = Callable[[Sequence[Card]], Optional[EvaluationResult]]


def positional_score(ranks: Sequence[Rank]) -> int:
    """
    Weight ranks by position, most significant first.

    Each position is worth RANK_WEIGHT_BASE times the next one, so a higher
    rank in an earlier position beats any ranks that follow it.
    """
    score = 0
    for rank in ranks:
        score = score * RANK_WEIGHT_BASE + rank.score
    return score


def rank_groups(hand: Sequence[Card]) -> List[Tuple[Rank, int]]:
    """Group cards by rank, largest group first, then highest rank first."""
    counts = Counter(card.rank for card in hand)
    return sorted(counts.items(), key=lambda kv: (kv[1], kv[0].score), reverse=True)


def group_pattern(hand: Sequence[Card]) -> List[int]:
    """Group sizes in descending order, e.g. [3, 2] for a full house."""
    return [count for _, count in rank_groups(hand)]


def is_flush(hand: Sequence[Card]) -> bool:
    return len({card.suit for card in hand}) == 1


def is_wheel(hand: Sequence[Card]) -> bool:
    """A-5-4-3-2, the straight where the Ace plays low."""
    return tuple(card.rank for card in hand) == WHEEL_RANKS


def is_consecutive(hand: Sequence[Card]) -> bool:
    return all(
        higher.score - lower.score == 1
        for higher, lower in zip(hand, hand[1:])
    )


def is_straight(hand: Sequence[Card]) -> bool:
    return is_consecutive(hand) or is_wheel(hand)


def _straight_ranks(hand: Sequence[Card]) -> Tuple[Rank, ...]:
    ranks = tuple(card.rank for card in hand)
    if is_wheel(hand):
        return ranks[1:] + ranks[:1]
    return ranks


def _straight_score(hand: Sequence[Card]) -> int:
    total = sum(card.score for card in hand)
    if is_wheel(hand):
        total += ACE_LOW_SCORE - Rank.ACE.score
    return total


def _grouped_result(hand: Sequence[Card], combination: Combination) -> EvaluationResult:
    ranks = tuple(rank for rank, _ in rank_groups(hand))
    return EvaluationResult(
        combination=combination,
        score=combination.base_score + positional_score(ranks),
        ranks=ranks,
    )


def match_royal_flush(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if is_flush(hand) and tuple(card.rank for card in hand) == ROYAL_RANKS:
        return EvaluationResult(
            combination=Combination.ROYAL_FLUSH,
            score=Combination.ROYAL_FLUSH.base_score,
            ranks=ROYAL_RANKS,
        )
    return None


def match_straight_flush(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if is_flush(hand) and is_straight(hand):
        return EvaluationResult(
            combination=Combination.STRAIGHT_FLUSH,
            score=Combination.STRAIGHT_FLUSH.base_score + _straight_score(hand),
            ranks=_straight_ranks(hand),
        )
    return None


def match_four_of_a_kind(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if group_pattern(hand) == [4, 1]:
        return _grouped_result(hand, Combination.FOUR_OF_A_KIND)
    return None


def match_full_house(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if group_pattern(hand) == [3, 2]:
        return _grouped_result(hand, Combination.FULL_HOUSE)
    return None


def match_flush(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if is_flush(hand):
        ranks = tuple(card.rank for card in hand)
        return EvaluationResult(
            combination=Combination.FLUSH,
            score=Combination.FLUSH.base_score + positional_score(ranks),
            ranks=ranks,
        )
    return None


def match_straight(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if is_straight(hand):
        return EvaluationResult(
            combination=Combination.STRAIGHT,
            score=Combination.STRAIGHT.base_score + _straight_score(hand),
            ranks=_straight_ranks(hand),
        )
    return None


def match_three_of_a_kind(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if group_pattern(hand) == [3, 1, 1]:
        return _grouped_result(hand, Combination.THREE_OF_A_KIND)
    return None


def match_two_pairs(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if group_pattern(hand) == [2, 2, 1]:
        return _grouped_result(hand, Combination.TWO_PAIRS)
    return None


def match_pair(hand: Sequence[Card]) -> Optional[EvaluationResult]:
    if group_pattern(hand) == [2, 1, 1, 1]:
        return _grouped_result(hand, Combination.PAIR)
    return None


def high_card(hand: Sequence[Card]) -> EvaluationResult:
    """Fallback for hands that match no combination."""
    ranks = tuple(card.rank for card in hand)
    return EvaluationResult(
        combination=Combination.HIGH_CARD,
        score=Combination.HIGH_CARD.base_score + positional_score(ranks),
        ranks=ranks,
    )


MATCHERS: Tuple[Matcher, ...] = (
    match_royal_flush,
    match_straight_flush,
    match_four_of_a_kind,
    match_full_house,
    match_flush,
    match_straight,
    match_three_of_a_kind,
    match_two_pairs,
    match_pair,
)
