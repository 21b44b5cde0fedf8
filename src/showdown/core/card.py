"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum

from showdown.core.errors import InvalidCardError


class Suit(Enum):
    """Card suits."""
    HEARTS = 'H'
    SPADES = 'S'
    DIAMONDS = 'D'
    CLUBS = 'C'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Suit':
        """Look up a suit by its symbol, ignoring case."""
        try:
            return cls(str(symbol).strip().upper())
        except ValueError:
            raise InvalidCardError(f"Invalid suit: {symbol!r}")


class Rank(Enum):
    """Card ranks."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = '10'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def score(self) -> int:
        """Ordinal value of the rank, 2 through 14 (Ace high)."""
        return RANK_SCORES[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """
        Look up a rank by its symbol, ignoring case.

        'T' is accepted as an alias for '10'.
        """
        normalized = str(symbol).strip().upper()
        if normalized == 'T':
            normalized = '10'
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidCardError(f"Invalid rank: {symbol!r}")


RANK_SCORES = {rank: score for score, rank in enumerate(Rank, start=2)}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (hearts, spades, diamonds, clubs)
    """
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank) or not isinstance(self.suit, Suit):
            raise InvalidCardError(f"Card needs a Rank and a Suit, got {self.rank!r}, {self.suit!r}")

    @property
    def score(self) -> int:
        """Ordinal rank value used for comparison."""
        return self.rank.score

    def same_rank(self, other: 'Card') -> bool:
        """Cards of the same rank form pairs, trips and quads regardless of suit."""
        return self.rank == other.rank

    def __lt__(self, other: 'Card') -> bool:
        """Cards order by rank only."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.score < other.score

    def __str__(self) -> str:
        """String representation in format 'KH' for King of hearts."""
        return f"{self.rank}{self.suit}"

    @classmethod
    def of(cls, rank: str, suit: str) -> 'Card':
        """
        Create a Card from separate rank and suit symbols.

        Args:
            rank: One of '2'..'10', 'J', 'Q', 'K', 'A'
            suit: One of 'H', 'S', 'D', 'C'

        Raises:
            InvalidCardError: If either symbol is unknown
        """
        return cls(rank=Rank.from_symbol(rank), suit=Suit.from_symbol(suit))

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Rank followed by suit, e.g. 'KH', '10s' or 'Td'

        Returns:
            Card instance

        Raises:
            InvalidCardError: If string format is invalid
        """
        text = str(card_str).strip()
        if len(text) not in (2, 3):
            raise InvalidCardError(f"Invalid card string: {card_str!r}")

        return cls.of(text[:-1], text[-1])
