"""Yearly Card — долгосрочная (годовая) карта по возрасту.

Ветвление по cycles = age // 7:

- cycles < 1 (возраст 0..6):
    1 применение таблицы, поиск карты рождения в next,
    adjusted = i + age + 1, чтение из next
- cycles >= 1:
    cycles + 1 применений, поиск в current,
    adjusted = i + (age - 7 * cycles) + 1, чтение из next

Асимметрия current/next между ветвями сохранена как есть.

Fallback:
- невалидная карта или age < 0 → FALLBACK_CARD_ID (1)
- карта не найдена / индекс вне [1, 52] → сама карта рождения
"""

from typing import Final

import structlog

from src.core.domain.card import FALLBACK_CARD_ID
from src.core.domain.errors import InvalidInputError, LookupFailure
from src.core.math.domain_guards import validate_age, validate_card_id
from src.core.math.permutation import is_valid_index
from src.core.math.spread import find_card_position, transformed_spread, wrap_index

log = structlog.get_logger(__name__)

# Длина долгосрочного цикла (лет)
YEARS_PER_CYCLE: Final[int] = 7


def derive_yearly_card(birth_card: int, age: int, use_cycle_shortcut: bool = False) -> int:
    """
    Годовая карта для возраста age.

    Args:
        birth_card: Карта рождения [1, 52]
        age: Возраст в полных годах (>= 0)
        use_cycle_shortcut: Считать spread через циклическую структуру

    Returns:
        Идентификатор карты в [1, 52]
    """
    try:
        validate_card_id(birth_card)
        validate_age(age)
    except InvalidInputError as e:
        log.warning("yearly_card_invalid_input", birth_card=birth_card, age=age, error=str(e))
        return FALLBACK_CARD_ID

    cycles = age // YEARS_PER_CYCLE

    try:
        if cycles < 1:
            spread = transformed_spread(1, use_cycle_shortcut)
            position = find_card_position(spread.next, birth_card)
            offset = age + 1
        else:
            spread = transformed_spread(cycles + 1, use_cycle_shortcut)
            position = find_card_position(spread.current, birth_card)
            offset = age - cycles * YEARS_PER_CYCLE + 1
    except LookupFailure as e:
        log.warning("yearly_card_lookup_failure", birth_card=birth_card, age=age, error=str(e))
        return birth_card

    adjusted = wrap_index(position + offset)
    if not is_valid_index(adjusted):
        log.warning("yearly_card_index_out_of_range", birth_card=birth_card, age=age, adjusted=adjusted)
        return birth_card

    return spread.next[adjusted]
