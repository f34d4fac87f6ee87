"""CardCalculationService — фасад расчёта карт для слоя представления.

Объединяет derivation-функции с часовым поясом и ограничениями профиля
из ServiceConfig, и добавляет соседние расклады:
- вчера / сегодня / завтра (карта дня)
- прошлый / текущий / следующий год (годовая карта)
- предыдущий / текущий / следующий 52-дневный период

Каждый вызов создаёт собственный SpreadEngine, поэтому один экземпляр
сервиса можно разделять между потоками.
"""

from dataclasses import dataclass
from datetime import date, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from src.core.contracts import DAILY_CARD_RESULT, READING_SNAPSHOT, validate_contract
from src.core.domain.planetary_period import planet_name
from src.core.domain.results import (
    DailyCardResult,
    DailyCardsAround,
    NeighbourCards,
    ReadingSnapshot,
)
from src.core.math.date_arithmetic import (
    MAX_AGE_YEARS_DEFAULT,
    DateLike,
    is_plausible_birth_date,
    normalize_date,
    resolve_timezone,
    today,
)
from src.readings.age import derive_age
from src.readings.birth_card import BirthCardLookup, derive_birth_card
from src.readings.daily_card import derive_daily_card
from src.readings.fifty_two_day_card import (
    derive_current_period,
    derive_fifty_two_day_card,
    next_period,
    previous_period,
)
from src.readings.yearly_card import derive_yearly_card


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ServiceConfig:
    """Конфигурация сервиса расчёта.

    timezone_name: IANA-имя часового пояса для дат рождения и целевых дат
        (None → UTC). Обе даты всегда нормализуются в одном поясе.
    """

    timezone_name: Optional[str] = None

    # Ограничение профиля: дата рождения не старше N лет
    max_age_years: int = MAX_AGE_YEARS_DEFAULT

    # Spread через циклическую структуру перестановки (O(52) вместо O(52 * n))
    use_cycle_shortcut: bool = False

    # Проверять результаты по JSON Schema контрактам перед возвратом
    validate_contracts: bool = False


# =============================================================================
# SERVICE
# =============================================================================


class CardCalculationService:
    """Сервис расчёта карт рождения, дня, года и 52-дневного периода."""

    def __init__(self, config: Optional[ServiceConfig] = None):
        """
        Args:
            config: Конфигурация сервиса (default: ServiceConfig())
        """
        self.config = config or ServiceConfig()
        self._tz: tzinfo = resolve_timezone(
            ZoneInfo(self.config.timezone_name) if self.config.timezone_name else None
        )
        self._lookup = BirthCardLookup()

    @property
    def tz(self) -> tzinfo:
        return self._tz

    # -------------------------------------------------------------------------
    # Базовые расчёты
    # -------------------------------------------------------------------------

    def birth_card(self, month: int, day: int) -> int:
        return derive_birth_card(month, day)

    def birth_card_for(self, birth_date: DateLike) -> int:
        return self._lookup.birth_card_for_date(birth_date, self._tz)

    def daily_card(self, birth_date: DateLike, birth_card: int, target_date: DateLike) -> DailyCardResult:
        result = derive_daily_card(
            birth_date,
            birth_card,
            target_date,
            tz=self._tz,
            use_cycle_shortcut=self.config.use_cycle_shortcut,
        )
        if self.config.validate_contracts:
            validate_contract(DAILY_CARD_RESULT, result.model_dump(mode="json"))
        return result

    def yearly_card(self, birth_card: int, age: int) -> int:
        return derive_yearly_card(birth_card, age, self.config.use_cycle_shortcut)

    def fifty_two_day_card(self, birth_card: int, age: int, period: int) -> int:
        return derive_fifty_two_day_card(birth_card, age, period, self.config.use_cycle_shortcut)

    def current_period(self, birth_date: DateLike, target_date: DateLike) -> int:
        return derive_current_period(birth_date, target_date, self._tz)

    def age(self, birth_date: DateLike, on_date: Optional[DateLike] = None) -> int:
        return derive_age(birth_date, on_date, self._tz)

    @staticmethod
    def period_planet(period: int) -> str:
        """Имя планеты для номера периода; 'Unknown' вне [1, 7]."""
        return planet_name(period)

    # -------------------------------------------------------------------------
    # Профиль
    # -------------------------------------------------------------------------

    def validate_birth_date(self, birth_date: DateLike, on_date: Optional[DateLike] = None) -> bool:
        """False, если дата рождения в будущем или старше max_age_years."""
        return is_plausible_birth_date(
            birth_date,
            on_date,
            max_age_years=self.config.max_age_years,
            tz=self._tz,
        )

    # -------------------------------------------------------------------------
    # Соседние расклады
    # -------------------------------------------------------------------------

    def daily_cards_around(self, birth_date: DateLike, target_date: Optional[DateLike] = None) -> DailyCardsAround:
        """Карты дня для target_date - 1, target_date, target_date + 1."""
        day = self._resolve_date(target_date)
        birth_card = self.birth_card_for(birth_date)

        return DailyCardsAround(
            yesterday=self.daily_card(birth_date, birth_card, day - timedelta(days=1)),
            today=self.daily_card(birth_date, birth_card, day),
            tomorrow=self.daily_card(birth_date, birth_card, day + timedelta(days=1)),
        )

    def yearly_cards_around(self, birth_date: DateLike, on_date: Optional[DateLike] = None) -> NeighbourCards:
        """
        Годовые карты для age - 1, age, age + 1.

        Для возраста 0 прошлый год даёт age = -1 → fallback 1.
        """
        day = self._resolve_date(on_date)
        birth_card = self.birth_card_for(birth_date)
        age = self.age(birth_date, day)

        return NeighbourCards(
            previous=self.yearly_card(birth_card, age - 1),
            current=self.yearly_card(birth_card, age),
            next=self.yearly_card(birth_card, age + 1),
        )

    def period_cards_around(self, birth_date: DateLike, on_date: Optional[DateLike] = None) -> NeighbourCards:
        """Карты предыдущего/текущего/следующего периода (переход 1 ↔ 7 внутри того же возраста)."""
        day = self._resolve_date(on_date)
        birth_card = self.birth_card_for(birth_date)
        age = self.age(birth_date, day)
        period = self.current_period(birth_date, day)

        return NeighbourCards(
            previous=self.fifty_two_day_card(birth_card, age, previous_period(period)),
            current=self.fifty_two_day_card(birth_card, age, period),
            next=self.fifty_two_day_card(birth_card, age, next_period(period)),
        )

    def reading(self, birth_date: DateLike, on_date: Optional[DateLike] = None) -> ReadingSnapshot:
        """Полный расклад профиля на дату."""
        birth = normalize_date(birth_date, self._tz)
        day = self._resolve_date(on_date)

        birth_card = self.birth_card_for(birth)
        age = self.age(birth, day)
        period = self.current_period(birth, day)

        snapshot = ReadingSnapshot(
            birth_date=birth,
            on_date=day,
            age=age,
            birth_card_id=birth_card,
            yearly_card_id=self.yearly_card(birth_card, age),
            period_number=period,
            period_planet=self.period_planet(period),
            fifty_two_day_card_id=self.fifty_two_day_card(birth_card, age, period),
            daily=self.daily_card(birth, birth_card, day),
        )
        if self.config.validate_contracts:
            validate_contract(READING_SNAPSHOT, snapshot.model_dump(mode="json"))
        return snapshot

    def _resolve_date(self, value: Optional[DateLike]) -> date:
        if value is None:
            return today(self._tz)
        return normalize_date(value, self._tz)
