"""Enumeration types for ledger entities."""

from enum import Enum

from ledger.exceptions import InvalidInputError


class TransactionKind(str, Enum):
    DEPOSIT = "deposito"
    WITHDRAWAL = "saque"

    @classmethod
    def parse(cls, value: "str | TransactionKind | None") -> "TransactionKind":
        """Parse a transaction kind case-insensitively.

        Accepts the wire values (``"deposito"``, ``"saque"``) and the accented
        ``"depósito"``. The member names (``"DEPOSIT"``, ``"WITHDRAWAL"``) are
        also accepted for internal callers only. External input should use
        the wire values, which are what every payload carries.

        Raises
        ------
        InvalidInputError
            If the value is missing or not a known kind.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            raise InvalidInputError("Tipo de transação não informado")

        normalized = value.strip().lower().replace("ó", "o")
        for kind in cls:
            if normalized in (kind.value, kind.name.lower()):
                return kind
        raise InvalidInputError(f"Tipo de transação inválido: {value}")
