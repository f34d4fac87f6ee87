"""
Errors — таксономия ошибок движка раскладов

Две категории:
- InvalidInputError: месяц/день/возраст/период/карта вне допустимого домена
- LookupFailure: карта рождения не найдена в spread после трансформации

Обе ошибки поднимаются низкоуровневыми хелперами и перехватываются
в публичных derivation-функциях, которые возвращают документированный
fallback. Наружу ничего не пропагирует.
"""


class InvalidInputError(ValueError):
    """Входные данные вне допустимого домена."""

    pass


class LookupFailure(LookupError):
    """
    Карта не найдена в spread.

    При корректной таблице перестановки и валидной карте недостижимо,
    но обрабатывается явно.
    """

    def __init__(self, card_id: int):
        super().__init__(f"card {card_id} not found in spread")
        self.card_id = card_id
