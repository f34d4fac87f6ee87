"""
Core math modules для движка раскладов

Таблица перестановки, spread engine, календарная арифметика и проверки домена.
"""

# Permutation Table
from src.core.math.permutation import (
    CARD_COUNT,
    CARD_ID_MAX,
    CARD_ID_MIN,
    FIXED_POINTS,
    TRANSFORMATION_MAP,
    as_mapping,
    cycle_decomposition,
    is_valid_index,
    permutation_order,
    validate_transformation_map,
)

# Spread Engine
from src.core.math.spread import (
    CardSpread,
    SpreadEngine,
    find_card_position,
    identity_arrangement,
    project_spread,
    transformed_spread,
    wrap_index,
)

# Date Arithmetic
from src.core.math.date_arithmetic import (
    DAYS_IN_WEEK,
    MAX_AGE_YEARS_DEFAULT,
    age_in_years,
    days_between,
    is_plausible_birth_date,
    normalize_date,
    trunc_divmod,
    weeks_and_remainder,
)

# Domain Guards
from src.core.math.domain_guards import (
    clamp,
    validate_age,
    validate_card_id,
    validate_in_range,
    validate_month_day,
    validate_period,
)

__all__ = [
    # Permutation Table: Constants
    "CARD_COUNT",
    "CARD_ID_MAX",
    "CARD_ID_MIN",
    "FIXED_POINTS",
    "TRANSFORMATION_MAP",
    # Permutation Table: Functions
    "as_mapping",
    "cycle_decomposition",
    "is_valid_index",
    "permutation_order",
    "validate_transformation_map",
    # Spread Engine
    "CardSpread",
    "SpreadEngine",
    "find_card_position",
    "identity_arrangement",
    "project_spread",
    "transformed_spread",
    "wrap_index",
    # Date Arithmetic
    "DAYS_IN_WEEK",
    "MAX_AGE_YEARS_DEFAULT",
    "age_in_years",
    "days_between",
    "is_plausible_birth_date",
    "normalize_date",
    "trunc_divmod",
    "weeks_and_remainder",
    # Domain Guards
    "clamp",
    "validate_age",
    "validate_card_id",
    "validate_in_range",
    "validate_month_day",
    "validate_period",
]
