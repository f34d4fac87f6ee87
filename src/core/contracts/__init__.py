"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов раскладов.
"""

from .validators import (
    DAILY_CARD_RESULT,
    READING_SNAPSHOT,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_contract,
)

__all__ = [
    # Schema names
    "DAILY_CARD_RESULT",
    "READING_SNAPSHOT",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "get_validator",
    "validate_contract",
]
