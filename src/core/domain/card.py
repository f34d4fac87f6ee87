"""
Card — Модель карты колоды

Immutable Pydantic модель одной из 52 карт. Идентификатор карты — стабильный
индекс в колоде:
- 1..13   — hearts
- 14..26  — clubs
- 27..39  — diamonds
- 40..52  — spades

Внутри масти порядок: A, 2..10, J, Q, K.
"""

from enum import Enum
from typing import Dict, Final, List, Tuple

from pydantic import BaseModel, Field, model_validator

from src.core.math.permutation import CARD_COUNT, CARD_ID_MAX, CARD_ID_MIN

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Карта по умолчанию при любой ошибке расчёта (Ace of Hearts)
FALLBACK_CARD_ID: Final[int] = 1

CARDS_PER_SUIT: Final[int] = 13

RANK_VALUES: Final[Tuple[str, ...]] = (
    "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K",
)

RANK_NAMES: Final[Tuple[str, ...]] = (
    "ACE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN",
    "EIGHT", "NINE", "TEN", "JACK", "QUEEN", "KING",
)


# =============================================================================
# ENUMS
# =============================================================================


class Suit(str, Enum):
    """Масть (в порядке блоков идентификаторов)"""

    HEARTS = "hearts"
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    SPADES = "spades"


SUIT_ORDER: Final[Tuple[Suit, ...]] = (Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES)


# =============================================================================
# CARD MODEL
# =============================================================================


class Card(BaseModel):
    """
    Карта колоды.

    Immutable модель (frozen=True). Описания и изображения карт
    разрешаются вызывающей стороной по id.
    """

    id: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX, description="Идентификатор карты [1, 52]")
    name: str = Field(..., min_length=1, description="Имя, например 'ACE OF HEARTS'")
    value: str = Field(..., min_length=1, description="Достоинство: A, 2..10, J, Q, K")
    suit: Suit = Field(..., description="Масть")
    title: str = Field(..., min_length=1, description="Заголовок, например 'The Ace of Hearts'")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_suit_block(self) -> "Card":
        """Масть должна соответствовать блоку идентификаторов."""
        expected = SUIT_ORDER[(self.id - 1) // CARDS_PER_SUIT]
        if self.suit != expected:
            raise ValueError(f"card {self.id} belongs to {expected.value}, got {self.suit.value}")
        return self

    @property
    def rank(self) -> int:
        """Порядковый номер в масти: 1 (ace) .. 13 (king)."""
        return (self.id - 1) % CARDS_PER_SUIT + 1


# =============================================================================
# КОЛОДА
# =============================================================================


def is_valid_card_id(card_id: int) -> bool:
    """Идентификатор карты в [1, 52]."""
    return CARD_ID_MIN <= card_id <= CARD_ID_MAX


def build_card(card_id: int) -> Card:
    """
    Построение карты по идентификатору.

    Raises:
        ValueError: card_id вне [1, 52]
    """
    if not is_valid_card_id(card_id):
        raise ValueError(f"card_id must be in [{CARD_ID_MIN}, {CARD_ID_MAX}], got {card_id}")

    suit = SUIT_ORDER[(card_id - 1) // CARDS_PER_SUIT]
    rank_index = (card_id - 1) % CARDS_PER_SUIT
    rank_name = RANK_NAMES[rank_index]

    return Card(
        id=card_id,
        name=f"{rank_name} OF {suit.value.upper()}",
        value=RANK_VALUES[rank_index],
        suit=suit,
        title=f"The {rank_name.capitalize()} of {suit.value.capitalize()}",
    )


def build_deck() -> List[Card]:
    """Полная колода в порядке идентификаторов."""
    return [build_card(card_id) for card_id in range(CARD_ID_MIN, CARD_COUNT + 1)]


_DECK: Final[Dict[int, Card]] = {card.id: card for card in build_deck()}


def get_card(card_id: int) -> Card:
    """Карта по идентификатору; неизвестный id → карта FALLBACK_CARD_ID."""
    return _DECK.get(card_id, _DECK[FALLBACK_CARD_ID])
