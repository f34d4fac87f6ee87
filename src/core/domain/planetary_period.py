"""
PlanetaryPeriod — планетарные периоды

Семь меток, циклически сменяющихся с днём недели от рождения
(для дневных раскладов) и с номером 52-дневного периода (для годовых).
"""

from enum import IntEnum

UNKNOWN_PLANET = "Unknown"


class PlanetaryPeriod(IntEnum):
    """Планетарный период (1-based)"""

    MERCURY = 1
    VENUS = 2
    MARS = 3
    JUPITER = 4
    SATURN = 5
    URANUS = 6
    NEPTUNE = 7

    @property
    def label(self) -> str:
        """Отображаемое имя: 'Mercury', 'Venus', ..."""
        return self.name.capitalize()

    @classmethod
    def from_day_number(cls, day_number: int) -> "PlanetaryPeriod":
        """Период по номеру дня, clamp в [1, 7]."""
        return cls(max(cls.MERCURY, min(cls.NEPTUNE, day_number)))


def planet_name(number: int) -> str:
    """
    Имя планеты по номеру периода без clamp.

    Returns:
        Имя планеты, либо 'Unknown' для номера вне [1, 7]
    """
    try:
        return PlanetaryPeriod(number).label
    except ValueError:
        return UNKNOWN_PLANET
