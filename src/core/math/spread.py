"""
Spread Engine — многократное применение таблицы трансформации

Модуль владеет двумя рабочими массивами по 53 slot'а (slot 0 не используется):
- current: текущая раскладка (source matrix)
- next: раскладка после применения таблицы (target matrix)

Один cycle():
    next[destination] = current[source]  для каждой пары таблицы
    current[1..52] = next[1..52]          (swap: next становится current)

Slot'ы, не затронутые ни одной парой, сохраняют предыдущее значение next.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После reset() slot i содержит карту i
2. Результат cycle_n_times(n) детерминирован и зависит только от n
3. project_spread(n) побитово совпадает с cycle_n_times(n)
4. Экземпляр SpreadEngine принадлежит одному вызову (не разделяется между потоками)
"""

from dataclasses import dataclass
from typing import List, Tuple

from src.core.domain.errors import InvalidInputError, LookupFailure
from src.core.math.permutation import (
    CARD_COUNT,
    CARD_ID_MAX,
    CARD_ID_MIN,
    TRANSFORMATION_MAP,
    cycle_decomposition,
    is_valid_index,
)


# =============================================================================
# SPREAD
# =============================================================================


def identity_arrangement() -> List[int]:
    """Раскладка-тождество: slot i = i для i в 0..52."""
    return list(range(CARD_COUNT + 1))


@dataclass
class CardSpread:
    """Пара рабочих массивов spread'а."""

    current: List[int]
    next: List[int]

    @classmethod
    def identity(cls) -> "CardSpread":
        return cls(current=identity_arrangement(), next=identity_arrangement())

    def snapshot(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """Неизменяемая копия обоих массивов (для сравнения и тестов)."""
        return tuple(self.current), tuple(self.next)


def find_card_position(arrangement: List[int], card_id: int) -> int:
    """
    Позиция карты в раскладке (поиск по slot'ам 1..52).

    Args:
        arrangement: Массив spread'а (53 slot'а)
        card_id: Искомая карта

    Returns:
        Индекс i в [1, 52], такой что arrangement[i] == card_id

    Raises:
        LookupFailure: Карта не найдена
    """
    for index in range(CARD_ID_MIN, min(CARD_ID_MAX, len(arrangement) - 1) + 1):
        if arrangement[index] == card_id:
            return index
    raise LookupFailure(card_id)


def wrap_index(index: int) -> int:
    """Однократный перенос через конец колоды: index > 52 → index - 52."""
    if index > CARD_COUNT:
        return index - CARD_COUNT
    return index


# =============================================================================
# ENGINE
# =============================================================================


class SpreadEngine:
    """
    Движок трансформации spread'а.

    Создаётся заново на каждый derivation-вызов; рабочие массивы не
    разделяются между вызовами.
    """

    def __init__(self, transformation_map: Tuple[Tuple[int, int], ...] = TRANSFORMATION_MAP):
        """
        Args:
            transformation_map: Пары (destination, source) (default: каноническая таблица)
        """
        self.transformation_map = transformation_map
        self.spread = CardSpread.identity()

    def reset(self) -> None:
        """Оба массива → тождественная раскладка."""
        self.spread = CardSpread.identity()

    def cycle(self) -> None:
        """
        Одно применение таблицы трансформации.

        Пары с индексом вне [1, 52] пропускаются.
        """
        current = self.spread.current
        target = self.spread.next

        for destination, source in self.transformation_map:
            if not is_valid_index(destination) or not is_valid_index(source):
                continue
            target[destination] = current[source]

        # swap: next становится current для следующего вызова
        for index in range(CARD_ID_MIN, CARD_ID_MAX + 1):
            current[index] = target[index]

    def cycle_n_times(self, n: int) -> CardSpread:
        """
        reset() один раз, затем cycle() ровно n раз.

        Args:
            n: Число применений (>= 1)

        Returns:
            Итоговый CardSpread (ссылка на рабочее состояние движка)

        Raises:
            InvalidInputError: n < 1
        """
        if n < 1:
            raise InvalidInputError(f"iterations must be >= 1, got {n}")

        self.reset()
        for _ in range(n):
            self.cycle()
        return self.spread


def project_spread(n: int, transformation_map: Tuple[Tuple[int, int], ...] = TRANSFORMATION_MAP) -> CardSpread:
    """
    Раскладка после n применений, вычисленная через циклическую структуру.

    Карта, стоящая в позиции cycle[k], после n применений оказывается в
    cycle[(k + n) % len(cycle)]. Сложность O(52) независимо от n.
    Для таблицы, задающей перестановку, совпадает с SpreadEngine.cycle_n_times(n).

    Raises:
        InvalidInputError: n < 1
    """
    if n < 1:
        raise InvalidInputError(f"iterations must be >= 1, got {n}")

    arrangement = identity_arrangement()
    for cycle in cycle_decomposition(transformation_map):
        length = len(cycle)
        for k, position in enumerate(cycle):
            arrangement[cycle[(k + n) % length]] = position

    return CardSpread(current=list(arrangement), next=list(arrangement))


def transformed_spread(iterations: int, use_cycle_shortcut: bool = False) -> CardSpread:
    """
    Свежий spread после заданного числа применений.

    Args:
        iterations: Число применений (>= 1)
        use_cycle_shortcut: Использовать project_spread вместо наивного цикла

    Raises:
        InvalidInputError: iterations < 1
    """
    if use_cycle_shortcut:
        return project_spread(iterations)
    return SpreadEngine().cycle_n_times(iterations)
