"""Constants for poker hand evaluation."""
from showdown.core.card import Rank

# One more than the highest rank score, so positional weights never overlap
RANK_WEIGHT_BASE = 15

# Wider than any tie-break a category can produce
CATEGORY_SPACING = RANK_WEIGHT_BASE ** 5

# Ace plays low in the wheel
ACE_LOW_SCORE = 1

# Descending order, as matchers see them
ROYAL_RANKS = (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN)
WHEEL_RANKS = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)
