class DomainError(Exception):
    """Базовая ошибка доменной модели"""


class InvalidArgumentError(DomainError, ValueError):
    """Отсутствует или пустое обязательное значение"""


class InvalidOperationError(DomainError):
    """Структурно недопустимое действие"""


class CycleDetectedError(InvalidOperationError):
    """Операция нарушила бы древовидность структуры"""


def require_text(value, argument: str, allow_blank: bool = False) -> str:
    """Проверка обязательного непустого строкового аргумента"""
    if value is None:
        raise InvalidArgumentError(f"{argument} is required")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{argument} must be a string")
    if not (value if allow_blank else value.strip()):
        raise InvalidArgumentError(f"{argument} cannot be empty")
    return value
