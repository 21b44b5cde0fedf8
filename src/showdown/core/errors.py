"""Exceptions raised while building and validating poker hands."""


class ShowdownError(ValueError):
    """Base class for every hand or card validation failure."""
    pass


class InvalidCardError(ShowdownError):
    """Exception raised when a rank or suit symbol is not recognised."""
    pass


class InvalidHandSizeError(ShowdownError):
    """Exception raised when a hand does not hold exactly five cards."""
    pass


class DuplicateCardError(ShowdownError):
    """Exception raised when the same card appears twice in a hand."""
    pass


class DegenerateHandError(ShowdownError):
    """Exception raised when every card in a hand shares one rank."""
    pass
