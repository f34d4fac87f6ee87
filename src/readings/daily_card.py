"""Daily Card — карта дня и планетарный период дня.

Порядок расчёта:
1. Даты рождения и целевая нормализуются к полуночи в одном часовом поясе
2. days = target - birth (целые дни, может быть отрицательным)
3. weeks, remainder = усекающее деление days на 7
4. Spread после weeks + 1 применений таблицы
5. Позиция i карты рождения в current
6. adjusted = i + 1 + remainder (перенос через 52)
7. Карта дня = next[adjusted]
8. Планета = PlanetaryPeriod(remainder + 1), clamp в [1, 7]

Отрицательная разница дней не "исправляется": остаток сохраняет знак делимого,
а weeks + 1 < 1 считается невалидным входом.

Fallback при любой ошибке: (clamp(birth_card, 1, 52), Mercury, 1).
"""

from datetime import tzinfo
from typing import Optional

import structlog

from src.core.domain.errors import InvalidInputError, LookupFailure
from src.core.domain.planetary_period import PlanetaryPeriod
from src.core.domain.results import DailyCardResult
from src.core.math.date_arithmetic import DateLike, days_between, weeks_and_remainder
from src.core.math.domain_guards import validate_card_id
from src.core.math.permutation import is_valid_index
from src.core.math.spread import find_card_position, transformed_spread, wrap_index

log = structlog.get_logger(__name__)


def derive_daily_card(
    birth_date: DateLike,
    birth_card: int,
    target_date: DateLike,
    tz: Optional[tzinfo] = None,
    use_cycle_shortcut: bool = False,
) -> DailyCardResult:
    """
    Карта дня для target_date.

    Args:
        birth_date: Дата рождения
        birth_card: Карта рождения [1, 52]
        target_date: Дата, для которой считается карта
        tz: Часовой пояс расчётов (default: UTC)
        use_cycle_shortcut: Считать spread через циклическую структуру

    Returns:
        DailyCardResult (card_id, planet, planet_num)
    """
    try:
        validate_card_id(birth_card)
        days = days_between(birth_date, target_date, tz)
        weeks, remainder = weeks_and_remainder(days)

        spread = transformed_spread(weeks + 1, use_cycle_shortcut)
        position = find_card_position(spread.current, birth_card)
    except (InvalidInputError, LookupFailure) as e:
        log.warning("daily_card_fallback", birth_card=birth_card, error=str(e))
        return DailyCardResult.fallback(birth_card)

    adjusted = wrap_index(position + 1 + remainder)
    if not is_valid_index(adjusted):
        log.warning(
            "daily_card_index_out_of_range",
            birth_card=birth_card,
            days=days,
            adjusted=adjusted,
        )
        return DailyCardResult.fallback(birth_card)

    planet = PlanetaryPeriod.from_day_number(remainder + 1)
    return DailyCardResult(
        card_id=spread.next[adjusted],
        planet=planet.label,
        planet_num=int(planet),
    )
