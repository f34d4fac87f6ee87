"""
Results — результаты раскладов

Immutable Pydantic модели, которые движок возвращает слою представления.
Соответствуют JSON Schema контрактам (src/core/contracts/schema/).
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.domain.card import FALLBACK_CARD_ID
from src.core.domain.planetary_period import PlanetaryPeriod
from src.core.math.permutation import CARD_ID_MAX, CARD_ID_MIN


# =============================================================================
# DAILY
# =============================================================================


class DailyCardResult(BaseModel):
    """
    Карта дня и планетарный период дня.

    planet_num — 1-based номер периода (Mercury = 1).
    """

    card_id: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX, description="Карта дня")
    planet: str = Field(..., min_length=1, description="Имя планетарного периода")
    planet_num: int = Field(..., ge=1, le=7, description="Номер планетарного периода")

    model_config = {"frozen": True}

    @classmethod
    def fallback(cls, card_id: int) -> "DailyCardResult":
        """
        Fallback-результат: карта clamp в [1, 52], Mercury/1.

        Не-int (в т.ч. bool) заменяется на FALLBACK_CARD_ID.
        """
        if not isinstance(card_id, int) or isinstance(card_id, bool):
            card_id = FALLBACK_CARD_ID
        return cls(
            card_id=max(CARD_ID_MIN, min(CARD_ID_MAX, card_id)),
            planet=PlanetaryPeriod.MERCURY.label,
            planet_num=int(PlanetaryPeriod.MERCURY),
        )


class DailyCardsAround(BaseModel):
    """Карты вчера / сегодня / завтра."""

    yesterday: DailyCardResult
    today: DailyCardResult
    tomorrow: DailyCardResult

    model_config = {"frozen": True}


# =============================================================================
# NEIGHBOURS
# =============================================================================


class NeighbourCards(BaseModel):
    """Карты предыдущего, текущего и следующего периода (года или 52-дневки)."""

    previous: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX)
    current: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX)
    next: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX)

    model_config = {"frozen": True}


# =============================================================================
# SNAPSHOT
# =============================================================================


class ReadingSnapshot(BaseModel):
    """
    Полный расклад на одну дату.

    Собирает все производные карты для профиля: карту рождения,
    годовую карту, карту 52-дневного периода и карту дня.
    """

    birth_date: date = Field(..., description="Дата рождения")
    on_date: date = Field(..., description="Дата расчёта")
    age: int = Field(..., ge=0, description="Возраст в полных годах")

    birth_card_id: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX)
    yearly_card_id: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX)

    period_number: int = Field(..., ge=1, le=7, description="Номер 52-дневного периода")
    period_planet: str = Field(..., min_length=1)
    fifty_two_day_card_id: int = Field(..., ge=CARD_ID_MIN, le=CARD_ID_MAX)

    daily: DailyCardResult

    model_config = {"frozen": True}
