"""52-Day Card — карта 52-дневного периода и номер текущего периода.

Год делится на 7 периодов по 52 дня (7 * 52 = 364).

Карта периода:
1. age + 1 применений таблицы
2. Позиция i карты рождения в current
3. adjusted = i + period (перенос через 52)
4. Карта = current[adjusted] (чтение из того же массива, где шёл поиск)

Fallback:
- невалидная карта, age < 0 или period вне [1, 7] → FALLBACK_CARD_ID (1)
- карта не найдена / индекс вне [1, 52] → сама карта рождения
"""

from datetime import tzinfo
from typing import Final, Optional

import structlog

from src.core.domain.card import FALLBACK_CARD_ID
from src.core.domain.errors import InvalidInputError, LookupFailure
from src.core.math.date_arithmetic import DateLike, days_between, trunc_divmod
from src.core.math.domain_guards import (
    PERIOD_MAX,
    PERIOD_MIN,
    clamp,
    validate_age,
    validate_card_id,
    validate_period,
)
from src.core.math.permutation import is_valid_index
from src.core.math.spread import find_card_position, transformed_spread, wrap_index

log = structlog.get_logger(__name__)

DAYS_IN_PERIOD_YEAR: Final[int] = 365
PERIOD_LENGTH_DAYS: Final[int] = 52


def derive_fifty_two_day_card(
    birth_card: int,
    age: int,
    period: int,
    use_cycle_shortcut: bool = False,
) -> int:
    """
    Карта 52-дневного периода.

    Args:
        birth_card: Карта рождения [1, 52]
        age: Возраст в полных годах (>= 0)
        period: Номер периода [1, 7]
        use_cycle_shortcut: Считать spread через циклическую структуру

    Returns:
        Идентификатор карты в [1, 52]
    """
    try:
        validate_card_id(birth_card)
        validate_age(age)
        validate_period(period)
    except InvalidInputError as e:
        log.warning(
            "fifty_two_day_card_invalid_input",
            birth_card=birth_card,
            age=age,
            period=period,
            error=str(e),
        )
        return FALLBACK_CARD_ID

    try:
        spread = transformed_spread(age + 1, use_cycle_shortcut)
        position = find_card_position(spread.current, birth_card)
    except LookupFailure as e:
        log.warning("fifty_two_day_card_lookup_failure", birth_card=birth_card, age=age, error=str(e))
        return birth_card

    adjusted = wrap_index(position + period)
    if not is_valid_index(adjusted):
        log.warning(
            "fifty_two_day_card_index_out_of_range",
            birth_card=birth_card,
            age=age,
            period=period,
            adjusted=adjusted,
        )
        return birth_card

    return spread.current[adjusted]


def derive_current_period(
    birth_date: DateLike,
    target_date: DateLike,
    tz: Optional[tzinfo] = None,
) -> int:
    """
    Номер текущего 52-дневного периода.

    day_in_year = days % 365, period = day_in_year // 52 + 1 (оба деления
    усекающие), результат clamp в [1, 7]. День 364 даёт 8 → 7.
    Не-дата на входе → PERIOD_MIN (1).

    Returns:
        Номер периода в [1, 7]
    """
    try:
        total_days = days_between(birth_date, target_date, tz)
    except InvalidInputError as e:
        log.warning("current_period_invalid_input", error=str(e))
        return PERIOD_MIN

    _, day_in_year = trunc_divmod(total_days, DAYS_IN_PERIOD_YEAR)
    period, _ = trunc_divmod(day_in_year, PERIOD_LENGTH_DAYS)
    return clamp(period + 1, PERIOD_MIN, PERIOD_MAX)


def previous_period(period: int) -> int:
    """Предыдущий период с переходом 1 → 7."""
    return PERIOD_MAX if period <= PERIOD_MIN else period - 1


def next_period(period: int) -> int:
    """Следующий период с переходом 7 → 1."""
    return PERIOD_MIN if period >= PERIOD_MAX else period + 1
