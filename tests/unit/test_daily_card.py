"""Unit тесты для карты дня.

Coverage:
- День рождения (days = 0): Mercury / 1
- Известные карты для положительных разниц дней
- Отрицательные разницы дней (усекающее деление)
- Fallback для невалидной карты рождения
- Совпадение naive и shortcut путей
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from structlog.testing import capture_logs

from src.core.domain.results import DailyCardResult
from src.readings.daily_card import derive_daily_card

BIRTH = date(1990, 6, 15)
BIRTH_CARD = 28


@pytest.fixture
def birth_date():
    """Дата рождения с картой 28 (2 of diamonds)."""
    return BIRTH


# =============================================================================
# POSITIVE DAYS
# =============================================================================


def test_daily_on_birth_date(birth_date):
    """days = 0 → weeks = 0, remainder = 0, Mercury."""
    result = derive_daily_card(birth_date, BIRTH_CARD, birth_date)

    assert result == DailyCardResult(card_id=50, planet="Mercury", planet_num=1)


def test_daily_on_birth_date_reproducible(birth_date):
    first = derive_daily_card(birth_date, BIRTH_CARD, birth_date)
    second = derive_daily_card(birth_date, BIRTH_CARD, birth_date)
    assert first == second


@pytest.mark.parametrize(
    "offset, card_id, planet, planet_num",
    [
        (0, 50, "Mercury", 1),
        (1, 21, "Venus", 2),
        (2, 32, "Mars", 3),
        (3, 43, "Jupiter", 4),
        (4, 10, "Saturn", 5),
        (5, 36, "Uranus", 6),
        (6, 47, "Neptune", 7),
        (10, 20, "Jupiter", 4),
    ],
)
def test_daily_known_cards(birth_date, offset, card_id, planet, planet_num):
    """Первая неделя после рождения и день 10."""
    result = derive_daily_card(birth_date, BIRTH_CARD, birth_date + timedelta(days=offset))

    assert result.card_id == card_id
    assert result.planet == planet
    assert result.planet_num == planet_num


def test_daily_wraps_past_end_of_deck():
    """Карта 52 в позиции 52: adjusted = 53 → 1."""
    birth = date(1990, 1, 1)
    result = derive_daily_card(birth, 52, birth)

    assert result.card_id == 3


def test_daily_long_life():
    """12000 дней: 1714 недель, остаток 2."""
    birth = date(1980, 12, 30)
    result = derive_daily_card(birth, 1, birth + timedelta(days=12000))

    assert result == DailyCardResult(card_id=39, planet="Mars", planet_num=3)


def test_daily_datetime_inputs_normalized(birth_date):
    """Время суток отбрасывается, обе даты в одном поясе."""
    birth = datetime(1990, 6, 15, 23, 0, tzinfo=timezone.utc)
    target = datetime(1990, 6, 16, 1, 0, tzinfo=timezone.utc)

    assert derive_daily_card(birth, BIRTH_CARD, target).planet == "Venus"


def test_daily_shortcut_matches_naive(birth_date):
    for offset in (0, 7, 100, 3650, 20000):
        target = birth_date + timedelta(days=offset)
        naive = derive_daily_card(birth_date, BIRTH_CARD, target)
        shortcut = derive_daily_card(birth_date, BIRTH_CARD, target, use_cycle_shortcut=True)
        assert naive == shortcut


def test_daily_range_for_all_cards(birth_date):
    """Для всех карт рождения результат в [1, 52]."""
    target = birth_date + timedelta(days=4321)
    for card in range(1, 53):
        result = derive_daily_card(birth_date, card, target)
        assert 1 <= result.card_id <= 52
        assert 1 <= result.planet_num <= 7


# =============================================================================
# NEGATIVE DAYS
# =============================================================================


def test_daily_day_before_birth(birth_date):
    """days = -1 → weeks = 0, remainder = -1; планета clamp в Mercury."""
    result = derive_daily_card(birth_date, BIRTH_CARD, birth_date - timedelta(days=1))

    assert result == DailyCardResult(card_id=28, planet="Mercury", planet_num=1)


def test_daily_three_days_before_birth(birth_date):
    """days = -3 → adjusted = 19 + 1 - 3 = 17."""
    result = derive_daily_card(birth_date, BIRTH_CARD, birth_date - timedelta(days=3))

    assert result == DailyCardResult(card_id=6, planet="Mercury", planet_num=1)


@pytest.mark.parametrize("offset", [7, 8, 10, 365])
def test_daily_week_or_more_before_birth_falls_back(birth_date, offset):
    """weeks + 1 < 1 → fallback (карта рождения, Mercury, 1)."""
    with capture_logs() as logs:
        result = derive_daily_card(birth_date, BIRTH_CARD, birth_date - timedelta(days=offset))

    assert result == DailyCardResult.fallback(BIRTH_CARD)
    assert logs[0]["event"] == "daily_card_fallback"


def test_daily_negative_index_falls_back():
    """Карта в позиции 1 (card 3), days = -3 → adjusted = -1 → fallback."""
    birth = date(1990, 6, 15)
    with capture_logs() as logs:
        result = derive_daily_card(birth, 3, birth - timedelta(days=3))

    assert result == DailyCardResult.fallback(3)
    assert logs[0]["event"] == "daily_card_index_out_of_range"


# =============================================================================
# INVALID INPUT
# =============================================================================


@pytest.mark.parametrize("birth_card, expected_card", [(0, 1), (-7, 1), (53, 52)])
def test_daily_invalid_birth_card(birth_date, birth_card, expected_card):
    result = derive_daily_card(birth_date, birth_card, birth_date)

    assert result == DailyCardResult(card_id=expected_card, planet="Mercury", planet_num=1)


def test_daily_invalid_date_type(birth_date):
    result = derive_daily_card("1990-06-15", BIRTH_CARD, birth_date)

    assert result == DailyCardResult.fallback(BIRTH_CARD)


@pytest.mark.parametrize("birth_card", [28.5, "28", None, True])
def test_daily_non_int_birth_card_falls_back(birth_date, birth_card):
    """Не-int карта рождения → (1, Mercury, 1), без исключений."""
    with capture_logs() as logs:
        result = derive_daily_card(birth_date, birth_card, birth_date)

    assert result == DailyCardResult(card_id=1, planet="Mercury", planet_num=1)
    assert logs[0]["event"] == "daily_card_fallback"
