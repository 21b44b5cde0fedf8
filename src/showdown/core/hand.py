"""Hand construction and validation."""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

from showdown.core.card import Card
from showdown.core.errors import (
    DegenerateHandError,
    DuplicateCardError,
    InvalidCardError,
    InvalidHandSizeError,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 5

CardLike = Union[Card, str, Tuple[str, str]]


def parse_card(item: CardLike) -> Card:
    """
    Build a Card from a Card, a (rank, suit) pair or card notation.

    Raises:
        InvalidCardError: If the item cannot be read as a card
    """
    if isinstance(item, Card):
        return item
    if isinstance(item, str):
        return Card.from_string(item)
    if isinstance(item, (tuple, list)) and len(item) == 2:
        rank, suit = item
        return Card.of(rank, suit)
    raise InvalidCardError(f"Cannot read a card from {item!r}")


def parse_hand(items: Iterable[CardLike]) -> List[Card]:
    """
    Create a new list of cards from caller supplied items.

    Args:
        items: Cards, (rank, suit) pairs or strings such as 'KH'

    Returns:
        A fresh list; the input is never modified
    """
    cards = []
    for i, item in enumerate(items):
        try:
            cards.append(parse_card(item))
        except InvalidCardError as e:
            raise InvalidCardError(f"Invalid card at position {i + 1}: {e}") from e
    return cards


class HandValidator:
    """
    Guards the structure of a hand before it is classified.

    Attributes:
        reject_degenerate: Whether a hand whose cards all share one rank
            is refused with DegenerateHandError
    """

    def __init__(self, reject_degenerate: bool = True):
        self.reject_degenerate = reject_degenerate

    def validate(self, cards: Sequence[Card]) -> None:
        """
        Check a hand of cards.

        Raises:
            InvalidHandSizeError: If the hand does not hold exactly five cards
            DegenerateHandError: If all cards share one rank and the policy rejects it
            DuplicateCardError: If the same rank and suit appear twice
        """
        if len(cards) != HAND_SIZE:
            raise InvalidHandSizeError(
                f"Hand must contain exactly {HAND_SIZE} cards, got {len(cards)}"
            )

        if self.reject_degenerate and len({card.rank for card in cards}) == 1:
            raise DegenerateHandError(
                f"Hand cannot contain more than 4 cards of rank {cards[0].rank}"
            )

        seen = set()
        for card in cards:
            if card in seen:
                raise DuplicateCardError(f"Hand cannot have duplicate cards: {card}")
            seen.add(card)

        logger.debug(f"Validated hand: {[str(c) for c in cards]}")
