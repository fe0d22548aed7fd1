"""Проверка введенного кода штата."""

import re
from typing import Optional

from models import ValidationResult, REGION_CODE_PATTERN

EMPTY_INPUT_MESSAGE = "Please enter a state abbreviation"
WRONG_LENGTH_MESSAGE = "State abbreviation must be 2 characters"
NOT_LETTERS_MESSAGE = "State abbreviation must contain only letters"

_REGION_CODE_RE = re.compile(REGION_CODE_PATTERN)


def normalize_state_input(raw: Optional[str]) -> str:
    """Убрать пробелы по краям и привести к верхнему регистру."""
    return (raw or "").strip().upper()


def validate_state_input(raw: Optional[str]) -> ValidationResult:
    """Проверить ввод пользователя.

    Проверки выполняются строго по порядку: пустая строка,
    длина, набор символов. Для любого ввода возвращается
    ровно одно сообщение об ошибке.

    Args:
        raw: Текст из поля ввода

    Returns:
        ValidationResult: Код штата или текст ошибки
    """
    code = normalize_state_input(raw)

    if code == "":
        return ValidationResult.invalid(EMPTY_INPUT_MESSAGE)

    if len(code) != 2:
        return ValidationResult.invalid(WRONG_LENGTH_MESSAGE)

    if not _REGION_CODE_RE.match(code):
        return ValidationResult.invalid(NOT_LETTERS_MESSAGE)

    return ValidationResult.valid_code(code)
