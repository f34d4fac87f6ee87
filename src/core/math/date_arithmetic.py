"""
Date Arithmetic — календарная арифметика для раскладов

- Нормализация дат к полуночи в одном часовом поясе
- Разница в целых днях между датой рождения и целевой датой
- Усекающее деление (truncating division) для отрицательных разниц
- Возраст в полных календарных годах

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе даты (рождения и целевая) приводятся к одному часовому поясу
2. Деление с остатком усекающее: -10 → (weeks=-1, remainder=-3)
3. Возраст никогда не отрицательный
"""

from datetime import date, datetime, timezone, tzinfo
from typing import Final, Optional, Tuple, Union

from src.core.domain.errors import InvalidInputError

DateLike = Union[date, datetime]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DAYS_IN_WEEK: Final[int] = 7

# Максимальный допустимый возраст для профиля (лет)
MAX_AGE_YEARS_DEFAULT: Final[int] = 150


# =============================================================================
# УСЕКАЮЩЕЕ ДЕЛЕНИЕ
# =============================================================================


def trunc_divmod(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от divmod() (округление вниз), частное округляется к нулю,
    а остаток имеет знак делимого.

    Examples:
        >>> trunc_divmod(10, 7)
        (1, 3)
        >>> trunc_divmod(-10, 7)
        (-1, -3)
        >>> trunc_divmod(-3, 7)
        (0, -3)
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


# =============================================================================
# НОРМАЛИЗАЦИЯ ДАТ
# =============================================================================


def resolve_timezone(tz: Optional[tzinfo]) -> tzinfo:
    """Часовой пояс расчётов (default: UTC)."""
    return tz if tz is not None else timezone.utc


def normalize_date(value: DateLike, tz: Optional[tzinfo] = None) -> date:
    """
    Календарная дата (полночь) в часовом поясе расчётов.

    - aware datetime → переводится в tz, время отбрасывается
    - naive datetime → время отбрасывается (считается уже локальным)
    - date → без изменений
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(resolve_timezone(tz)).date()
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInputError(f"expected date or datetime, got {type(value).__name__}")


def today(tz: Optional[tzinfo] = None) -> date:
    """Текущая дата в часовом поясе расчётов."""
    return datetime.now(resolve_timezone(tz)).date()


def days_between(start: DateLike, end: DateLike, tz: Optional[tzinfo] = None) -> int:
    """
    Целое число дней от start до end (отрицательное, если end раньше start).

    Обе даты нормализуются в одном часовом поясе.
    """
    return (normalize_date(end, tz) - normalize_date(start, tz)).days


def weeks_and_remainder(days: int) -> Tuple[int, int]:
    """Разбиение разницы в днях на (недели, остаток дней) с усечением."""
    return trunc_divmod(days, DAYS_IN_WEEK)


# =============================================================================
# ВОЗРАСТ
# =============================================================================


def age_in_years(
    birth_date: DateLike,
    reference_date: Optional[DateLike] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    """
    Число полных календарных лет от рождения до reference_date.

    Args:
        birth_date: Дата рождения
        reference_date: Дата расчёта (default: сегодня в tz)
        tz: Часовой пояс расчётов

    Returns:
        Возраст в годах, не меньше 0
    """
    birth = normalize_date(birth_date, tz)
    reference = normalize_date(reference_date, tz) if reference_date is not None else today(tz)

    years = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        years -= 1
    return max(0, years)


def is_plausible_birth_date(
    birth_date: DateLike,
    on_date: Optional[DateLike] = None,
    max_age_years: int = MAX_AGE_YEARS_DEFAULT,
    tz: Optional[tzinfo] = None,
) -> bool:
    """
    Проверка даты рождения для профиля.

    Returns:
        False, если дата в будущем или возраст больше max_age_years
    """
    birth = normalize_date(birth_date, tz)
    reference = normalize_date(on_date, tz) if on_date is not None else today(tz)

    if birth > reference:
        return False
    return age_in_years(birth, reference) <= max_age_years
