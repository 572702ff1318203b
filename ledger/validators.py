"""Checksum validation for Brazilian national IDs (CPF and CNPJ).

Both validators are pure and total: any string input (or ``None``) yields a
bool, never an exception. Punctuation is ignored, so ``"123.456.789-09"`` and
``"12345678909"`` validate identically.
"""

import re

_NON_DIGITS = re.compile(r"\D")

CPF_LENGTH = 11
CNPJ_LENGTH = 14

CNPJ_FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value: str | None) -> str:
    """Strip every non-digit character.

    Parameters
    ----------
    value : str | None
        Raw identifier, formatted or not.

    Returns
    -------
    str
        Digits only (empty for ``None``).
    """
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def _check_digit(digits: str, weights: tuple[int, ...]) -> int:
    """Compute a mod-11 check digit for ``digits`` using ``weights``."""
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _has_valid_shape(digits: str, length: int) -> bool:
    # all-identical sequences pass the checksum but are known invalid
    return len(digits) == length and digits != digits[0] * length


def is_valid_cpf(value: str | None) -> bool:
    """Validate a CPF (11-digit individual taxpayer ID).

    Parameters
    ----------
    value : str | None
        CPF, with or without ``.``/``-`` punctuation.

    Returns
    -------
    bool
        True when both check digits match.
    """
    digits = only_digits(value)
    if not _has_valid_shape(digits, CPF_LENGTH):
        return False

    first = _check_digit(digits[:9], tuple(range(10, 1, -1)))
    second = _check_digit(digits[:9] + str(first), tuple(range(11, 1, -1)))
    return digits[9:] == f"{first}{second}"


def is_valid_cnpj(value: str | None) -> bool:
    """Validate a CNPJ (14-digit company taxpayer ID).

    Parameters
    ----------
    value : str | None
        CNPJ, with or without ``.``/``/``/``-`` punctuation.

    Returns
    -------
    bool
        True when both check digits match.
    """
    digits = only_digits(value)
    if not _has_valid_shape(digits, CNPJ_LENGTH):
        return False

    first = _check_digit(digits[:12], CNPJ_FIRST_WEIGHTS)
    second = _check_digit(digits[:12] + str(first), CNPJ_SECOND_WEIGHTS)
    return digits[12:] == f"{first}{second}"
