"""
Permutation Table — фиксированная трансформация 52 карт

Каноническая таблица "квадрации" (quadration): пары (destination, source)
над доменом 1..52. Одно применение таблицы переносит карту из позиции
source в позицию destination.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица неизменяема на всё время жизни процесса
2. Каждый индекс встречается не более одного раза как source и как destination
3. Индексы 11, 21, 52 — неподвижные точки (не участвуют ни в одной паре)
4. Таблица + неподвижные точки образуют биекцию 1..52 → 1..52
"""

import math
from typing import Dict, Final, List, Tuple

# =============================================================================
# КОНСТАНТЫ ДОМЕНА
# =============================================================================

# Число карт в колоде (slot 0 в spread не используется)
CARD_COUNT: Final[int] = 52

# Минимальный и максимальный идентификатор карты
CARD_ID_MIN: Final[int] = 1
CARD_ID_MAX: Final[int] = CARD_COUNT

# Индексы, не затронутые трансформацией
FIXED_POINTS: Final[Tuple[int, ...]] = (11, 21, 52)


# =============================================================================
# ТАБЛИЦА ТРАНСФОРМАЦИИ
# =============================================================================

# (destination, source): next[destination] = current[source]
TRANSFORMATION_MAP: Final[Tuple[Tuple[int, int], ...]] = (
    (27, 1), (14, 2), (1, 3), (43, 4), (30, 5), (17, 6), (8, 7), (46, 8), (33, 9), (24, 10),
    (49, 12), (15, 13), (2, 14), (40, 15), (31, 16), (18, 17), (5, 18), (47, 19), (34, 20),
    (12, 22), (50, 23), (37, 24), (3, 25), (41, 26), (28, 27), (19, 28), (6, 29), (44, 30), (35, 31),
    (22, 32), (9, 33), (51, 34), (38, 35), (25, 36), (42, 37), (29, 38), (16, 39), (7, 40), (45, 41),
    (32, 42), (23, 43), (10, 44), (48, 45), (39, 46), (26, 47), (13, 48), (4, 49), (20, 50), (36, 51),
)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_index(index: int) -> bool:
    """Индекс slot'а в допустимом диапазоне [1, 52]."""
    return CARD_ID_MIN <= index <= CARD_ID_MAX


def validate_transformation_map(
    pairs: Tuple[Tuple[int, int], ...] = TRANSFORMATION_MAP,
) -> None:
    """
    Проверка, что таблица задаёт перестановку.

    Args:
        pairs: Пары (destination, source)

    Raises:
        ValueError: Индекс вне [1, 52], повтор source/destination,
            либо множества source и destination не совпадают
    """
    destinations = set()
    sources = set()

    for destination, source in pairs:
        if not is_valid_index(destination) or not is_valid_index(source):
            raise ValueError(f"pair ({destination}, {source}) out of range [1, {CARD_COUNT}]")
        if destination in destinations:
            raise ValueError(f"duplicate destination {destination}")
        if source in sources:
            raise ValueError(f"duplicate source {source}")
        destinations.add(destination)
        sources.add(source)

    # Неподвижные точки дополняют таблицу до биекции
    if destinations != sources:
        raise ValueError("sources and destinations differ: table is not a permutation")


def as_mapping(pairs: Tuple[Tuple[int, int], ...] = TRANSFORMATION_MAP) -> Dict[int, int]:
    """
    Полная перестановка source → destination над 1..52.

    Индексы, не участвующие в таблице, отображаются сами в себя.
    """
    mapping = {index: index for index in range(CARD_ID_MIN, CARD_ID_MAX + 1)}
    for destination, source in pairs:
        mapping[source] = destination
    return mapping


def cycle_decomposition(
    pairs: Tuple[Tuple[int, int], ...] = TRANSFORMATION_MAP,
) -> List[List[int]]:
    """
    Разложение перестановки на независимые циклы.

    Каждый цикл — список позиций в порядке движения карты:
    карта из cycle[k] после одного применения оказывается в cycle[k + 1].

    Returns:
        Список циклов, отсортированный по первому (минимальному) элементу
    """
    mapping = as_mapping(pairs)
    seen = set()
    cycles: List[List[int]] = []

    for start in range(CARD_ID_MIN, CARD_ID_MAX + 1):
        if start in seen:
            continue
        cycle = []
        position = start
        while position not in seen:
            seen.add(position)
            cycle.append(position)
            position = mapping[position]
        cycles.append(cycle)

    return cycles


def permutation_order(pairs: Tuple[Tuple[int, int], ...] = TRANSFORMATION_MAP) -> int:
    """Порядок перестановки: НОК длин всех циклов."""
    order = 1
    for cycle in cycle_decomposition(pairs):
        length = len(cycle)
        order = order * length // math.gcd(order, length)
    return order


# Таблица проверяется один раз при импорте
validate_transformation_map()
