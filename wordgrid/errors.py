"""Exception hierarchy for the word grid search core."""


class WordGridError(Exception):
    """Base exception for search failures."""


class NotReady(WordGridError):
    """Raised when a search runs before its dictionary index is built."""


class InvalidShape(WordGridError, ValueError):
    """Raised for non-positive grid dimensions or a tile count that disagrees with them."""
