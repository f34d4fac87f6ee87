"""Readings — derivation-функции раскладов и сервис-фасад.

- Карта рождения (месяц/день)
- Карта дня + планетарный период
- Годовая (долгосрочная) карта
- Карта 52-дневного периода и номер текущего периода
- Возраст
"""

from .age import derive_age
from .birth_card import BirthCardLookup, derive_birth_card
from .daily_card import derive_daily_card
from .fifty_two_day_card import (
    derive_current_period,
    derive_fifty_two_day_card,
    next_period,
    previous_period,
)
from .service import CardCalculationService, ServiceConfig
from .yearly_card import derive_yearly_card

__all__ = [
    "derive_age",
    "derive_birth_card",
    "derive_daily_card",
    "derive_yearly_card",
    "derive_fifty_two_day_card",
    "derive_current_period",
    "next_period",
    "previous_period",
    "BirthCardLookup",
    "CardCalculationService",
    "ServiceConfig",
]
