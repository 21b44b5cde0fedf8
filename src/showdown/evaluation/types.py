"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Tuple

from showdown.core.card import Rank
from showdown.evaluation.constants import CATEGORY_SPACING


@total_ordering
class Combination(Enum):
    """Hand categories, weakest first."""
    HIGH_CARD = 'HighCard'
    PAIR = 'Pair'
    TWO_PAIRS = 'TwoPairs'
    THREE_OF_A_KIND = 'ThreeOfAKind'
    STRAIGHT = 'Straight'
    FLUSH = 'Flush'
    FULL_HOUSE = 'FullHouse'
    FOUR_OF_A_KIND = 'FourOfAKind'
    STRAIGHT_FLUSH = 'StraightFlush'
    ROYAL_FLUSH = 'RoyalFlush'

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: 'Combination') -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return self.strength < other.strength

    @property
    def strength(self) -> int:
        """Position in the category ordering, 0 for HighCard."""
        return list(Combination).index(self)

    @property
    def base_score(self) -> int:
        """Offset added to every score in this category."""
        return self.strength * CATEGORY_SPACING

    @property
    def display_name(self) -> str:
        """Name with spaces, e.g. 'Full House'."""
        return self.name.replace('_', ' ').title().replace(' Of A ', ' of a ')


@dataclass(frozen=True)
class EvaluationResult:
    """
    Result of evaluating one hand.

    Attributes:
        combination: Category the hand belongs to
        score: Comparable value; higher beats lower
        ranks: Ranks that decide the hand, most significant first
    """
    combination: Combination
    score: int
    ranks: Tuple[Rank, ...] = field(default=(), compare=False)

    def __lt__(self, other: 'EvaluationResult') -> bool:
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        return self.score < other.score

    def __gt__(self, other: 'EvaluationResult') -> bool:
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        return self.score > other.score

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "combination": self.combination.value,
            "score": self.score,
            "ranks": [rank.value for rank in self.ranks],
        }
