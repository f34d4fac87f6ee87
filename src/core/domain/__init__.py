"""
Domain models and value objects.

Contains cards, planetary periods, reading results and the error taxonomy.
"""

from src.core.domain.card import (
    FALLBACK_CARD_ID,
    Card,
    Suit,
    build_card,
    build_deck,
    get_card,
    is_valid_card_id,
)
from src.core.domain.errors import InvalidInputError, LookupFailure
from src.core.domain.planetary_period import PlanetaryPeriod, planet_name
from src.core.domain.results import (
    DailyCardResult,
    DailyCardsAround,
    NeighbourCards,
    ReadingSnapshot,
)

__all__ = [
    # Card model
    "FALLBACK_CARD_ID",
    "Card",
    "Suit",
    "build_card",
    "build_deck",
    "get_card",
    "is_valid_card_id",
    # Errors
    "InvalidInputError",
    "LookupFailure",
    # Planetary periods
    "PlanetaryPeriod",
    "planet_name",
    # Results
    "DailyCardResult",
    "DailyCardsAround",
    "NeighbourCards",
    "ReadingSnapshot",
]
