"""Unit тесты для derive_age."""

from datetime import date

import pytest
from structlog.testing import capture_logs

from src.readings.age import derive_age


def test_age_full_years():
    assert derive_age(date(1990, 6, 15), date(2024, 6, 14)) == 33
    assert derive_age(date(1990, 6, 15), date(2024, 6, 15)) == 34


def test_age_future_birth_floored():
    assert derive_age(date(2030, 1, 1), date(2024, 1, 1)) == 0


@pytest.mark.parametrize("bad", ["1990-06-15", 1990, object()])
def test_age_invalid_date_falls_back(bad):
    """Не-дата → 0, без исключений."""
    with capture_logs() as logs:
        assert derive_age(bad, date(2024, 1, 1)) == 0
        assert derive_age(date(1990, 6, 15), bad) == 0

    assert [entry["event"] for entry in logs] == ["age_invalid_input", "age_invalid_input"]
