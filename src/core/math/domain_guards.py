"""
Domain Guards — проверки домена для целочисленных параметров раскладов

Модуль централизует проверки входов derivation-функций:
- Идентификатор карты в [1, 52]
- Месяц/день рождения в [1, 12] / [1, 31]
- Возраст неотрицательный
- Номер 52-дневного периода в [1, 7]

Все проверки поднимают InvalidInputError; derivation-функции перехватывают
её и возвращают fallback.
"""

from typing import Final, Optional

from src.core.domain.errors import InvalidInputError
from src.core.math.permutation import CARD_ID_MAX, CARD_ID_MIN

# =============================================================================
# ГРАНИЦЫ ДОМЕНА
# =============================================================================

MONTH_MIN: Final[int] = 1
MONTH_MAX: Final[int] = 12

DAY_MIN: Final[int] = 1
DAY_MAX: Final[int] = 31

PERIOD_MIN: Final[int] = 1
PERIOD_MAX: Final[int] = 7


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: int,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(9, 1, 7)
        7
        >>> clamp(0, 1, 7)
        1
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: int,
    name: str,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> None:
    """
    Валидация, что целое значение в заданном диапазоне.

    Raises:
        InvalidInputError: value не int или вне диапазона
    """
    # bool является подклассом int, но как вход не допускается
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInputError(f"{name} must be an int, got {type(value).__name__}")

    if min_value is not None and value < min_value:
        raise InvalidInputError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidInputError(f"{name} must be <= {max_value}, got {value}")


def validate_card_id(card_id: int, name: str = "birth_card") -> None:
    """Идентификатор карты в [1, 52]."""
    validate_in_range(card_id, name, CARD_ID_MIN, CARD_ID_MAX)


def validate_month_day(month: int, day: int) -> None:
    """Месяц в [1, 12], день в [1, 31] (без проверки длины месяца)."""
    validate_in_range(month, "month", MONTH_MIN, MONTH_MAX)
    validate_in_range(day, "day", DAY_MIN, DAY_MAX)


def validate_age(age: int) -> None:
    """Возраст >= 0."""
    validate_in_range(age, "age", min_value=0)


def validate_period(period: int) -> None:
    """Номер 52-дневного периода в [1, 7]."""
    validate_in_range(period, "period", PERIOD_MIN, PERIOD_MAX)
