"""Unit тесты для карты 52-дневного периода.

Coverage:
- Карта периода (age + 1 применений, чтение из current)
- Номер текущего периода и clamp дня 364
- Переход между периодами 1 ↔ 7
- Fallback для невалидного входа
"""

from datetime import date, timedelta

import pytest
from structlog.testing import capture_logs

from src.readings.fifty_two_day_card import (
    derive_current_period,
    derive_fifty_two_day_card,
    next_period,
    previous_period,
)

BIRTH = date(1990, 6, 15)


# =============================================================================
# КАРТА ПЕРИОДА
# =============================================================================


class TestFiftyTwoDayCard:
    """Тесты для derive_fifty_two_day_card"""

    @pytest.mark.parametrize(
        "period, expected",
        [(1, 26), (2, 52), (3, 13), (4, 2), (5, 48), (6, 3), (7, 12)],
    )
    def test_all_periods_at_age_35(self, period, expected):
        assert derive_fifty_two_day_card(28, 35, period) == expected

    def test_newborn(self):
        """age = 0: одно применение таблицы."""
        assert derive_fifty_two_day_card(28, 0, 1) == 50
        assert derive_fifty_two_day_card(28, 0, 2) == 21
        assert derive_fifty_two_day_card(28, 0, 7) == 47

    def test_wraps_past_end_of_deck(self):
        """Карта 52 в позиции 52: adjusted = 53 → 1."""
        assert derive_fifty_two_day_card(52, 0, 1) == 3

    def test_other_card(self):
        assert derive_fifty_two_day_card(51, 3, 7) == 13

    @pytest.mark.parametrize(
        "birth_card, age, period",
        [(0, 10, 1), (53, 10, 1), (28, -1, 1), (28, 10, 0), (28, 10, 8)],
    )
    def test_invalid_input_falls_back(self, birth_card, age, period):
        assert derive_fifty_two_day_card(birth_card, age, period) == 1

    def test_range_full_domain(self):
        """Все карты × возраст 0..150 × период 1..7 → [1, 52]."""
        for card in range(1, 53):
            for age in range(0, 151):
                for period in range(1, 8):
                    assert 1 <= derive_fifty_two_day_card(card, age, period, use_cycle_shortcut=True) <= 52

    def test_shortcut_matches_naive(self):
        for age in (0, 35, 89, 90, 140):
            for period in range(1, 8):
                naive = derive_fifty_two_day_card(28, age, period)
                assert derive_fifty_two_day_card(28, age, period, use_cycle_shortcut=True) == naive


# =============================================================================
# ТЕКУЩИЙ ПЕРИОД
# =============================================================================


class TestCurrentPeriod:
    """Тесты для derive_current_period"""

    @pytest.mark.parametrize(
        "days, expected",
        [(0, 1), (51, 1), (52, 2), (104, 3), (311, 6), (312, 7), (363, 7), (364, 7), (365, 1), (417, 2)],
    )
    def test_period_by_days(self, days, expected):
        assert derive_current_period(BIRTH, BIRTH + timedelta(days=days)) == expected

    def test_day_364_clamped(self):
        """364 // 52 + 1 = 8 → 7."""
        assert derive_current_period(BIRTH, BIRTH + timedelta(days=364)) == 7

    def test_many_decades(self):
        """50000 дней: 136 лет + 360 дней → 360 // 52 + 1 = 7."""
        assert derive_current_period(BIRTH, BIRTH + timedelta(days=50000)) == 7
        assert derive_current_period(BIRTH, BIRTH + timedelta(days=49740)) == 2

    @pytest.mark.parametrize("bad", ["1990-06-15", None, 42])
    def test_invalid_date_falls_back(self, bad):
        """Не-дата → период 1, без исключений."""
        with capture_logs() as logs:
            assert derive_current_period(bad, BIRTH) == 1
            assert derive_current_period(BIRTH, bad) == 1

        assert logs[0]["event"] == "current_period_invalid_input"

    @pytest.mark.parametrize("days", [1, 10, 60, 400])
    def test_before_birth_clamped_to_first(self, days):
        assert derive_current_period(BIRTH, BIRTH - timedelta(days=days)) == 1


class TestPeriodNeighbours:
    """Тесты для previous_period / next_period"""

    def test_previous(self):
        assert previous_period(4) == 3
        assert previous_period(1) == 7

    def test_next(self):
        assert next_period(4) == 5
        assert next_period(7) == 1
