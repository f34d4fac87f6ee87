"""Age — возраст в полных календарных годах."""

from datetime import tzinfo
from typing import Optional

import structlog

from src.core.domain.errors import InvalidInputError
from src.core.math.date_arithmetic import DateLike, age_in_years

log = structlog.get_logger(__name__)


def derive_age(
    birth_date: DateLike,
    reference_date: Optional[DateLike] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    """
    Возраст на reference_date (default: сегодня), не меньше 0.

    Не-дата на входе → 0.

    Examples:
        >>> from datetime import date
        >>> derive_age(date(1990, 6, 15), date(2024, 6, 14))
        33
        >>> derive_age(date(1990, 6, 15), date(2024, 6, 15))
        34
    """
    try:
        return age_in_years(birth_date, reference_date, tz)
    except InvalidInputError as e:
        log.warning("age_invalid_input", error=str(e))
        return 0
