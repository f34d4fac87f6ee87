"""Birth Card — карта рождения по месяцу и дню.

Формула: card = 55 - (day + 2 * month)

Порядок проверок:
1. month в [1, 12], day в [1, 31] (длина месяца не проверяется: 30 февраля
   принимается как арифметика)
2. Результат в [1, 52]

Любое нарушение → FALLBACK_CARD_ID (1). Исключения не пропагируют.
"""

from datetime import tzinfo
from typing import Dict, Final, List, Optional, Tuple

import structlog

from src.core.domain.card import FALLBACK_CARD_ID, is_valid_card_id
from src.core.domain.errors import InvalidInputError
from src.core.math.date_arithmetic import DateLike, normalize_date
from src.core.math.domain_guards import validate_month_day

log = structlog.get_logger(__name__)

BIRTH_CARD_BASE: Final[int] = 55
MONTH_MULTIPLIER: Final[int] = 2

# Високосный календарь: 29 февраля: допустимая дата рождения
DAYS_IN_MONTH: Final[Tuple[int, ...]] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def birth_card_formula(month: int, day: int) -> int:
    """Сырое значение формулы без проверки диапазона."""
    return BIRTH_CARD_BASE - (day + MONTH_MULTIPLIER * month)


def derive_birth_card(month: int, day: int) -> int:
    """
    Карта рождения.

    Args:
        month: Месяц рождения [1, 12]
        day: День рождения [1, 31]

    Returns:
        Идентификатор карты в [1, 52]; 1 при невалидном входе или
        результате вне диапазона (например, 31 декабря → 0 → 1)

    Examples:
        >>> derive_birth_card(1, 1)
        52
        >>> derive_birth_card(6, 15)
        28
        >>> derive_birth_card(12, 31)
        1
    """
    try:
        validate_month_day(month, day)
    except InvalidInputError as e:
        log.warning("birth_card_invalid_input", month=month, day=day, error=str(e))
        return FALLBACK_CARD_ID

    result = birth_card_formula(month, day)
    if not is_valid_card_id(result):
        log.warning("birth_card_out_of_range", month=month, day=day, result=result)
        return FALLBACK_CARD_ID

    return result


class BirthCardLookup:
    """
    Таблицы соответствия дата рождения ↔ карта рождения.

    Строятся один раз по високосному календарю (366 дат).
    """

    def __init__(self):
        self._date_to_card: Dict[Tuple[int, int], int] = {}
        self._card_to_dates: Dict[int, List[Tuple[int, int]]] = {}

        for month, days in enumerate(DAYS_IN_MONTH, start=1):
            for day in range(1, days + 1):
                card_id = birth_card_formula(month, day)
                if not is_valid_card_id(card_id):
                    card_id = FALLBACK_CARD_ID
                self._date_to_card[(month, day)] = card_id
                self._card_to_dates.setdefault(card_id, []).append((month, day))

    def birth_card(self, month: int, day: int) -> int:
        """Карта рождения из таблицы; даты вне таблицы считаются по формуле."""
        card_id = self._date_to_card.get((month, day))
        if card_id is None:
            return derive_birth_card(month, day)
        return card_id

    def birth_card_for_date(self, birth_date: DateLike, tz: Optional[tzinfo] = None) -> int:
        """Карта рождения для даты (месяц и день в часовом поясе расчётов)."""
        normalized = normalize_date(birth_date, tz)
        return self.birth_card(normalized.month, normalized.day)

    def dates_for_card(self, card_id: int) -> List[Tuple[int, int]]:
        """Все (month, day), дающие данную карту, в календарном порядке."""
        return list(self._card_to_dates.get(card_id, []))

    def is_valid_birth_date(self, month: int, day: int) -> bool:
        """Существует ли такая дата в (високосном) календаре."""
        return (month, day) in self._date_to_card

    def all_date_cards(self) -> List[Tuple[int, int, int]]:
        """Все тройки (month, day, card_id), отсортированные по дате."""
        return [
            (month, day, card_id)
            for (month, day), card_id in sorted(self._date_to_card.items())
        ]
