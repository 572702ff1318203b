"""Transaction execution: fee calculation, balance update and notification."""

from datetime import datetime
from decimal import Decimal, DecimalException, InvalidOperation, getcontext

from ledger.config import LedgerConfig
from ledger.exceptions import InvalidEntityStateError, InvalidInputError
from ledger.logging import get_logger
from ledger.models import Company, Transaction, TransactionKind
from ledger.notifications import NotificationDispatcher
from ledger.store import LedgerRepository
from ledger.validators import only_digits

logger = get_logger(__name__)


def to_decimal(value: object, field_name: str) -> Decimal:
    """Coerce a caller-supplied number to Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.

    Raises
    ------
    InvalidInputError
        If the value is missing, boolean, non-numeric, not finite or outside
        the exponent range of the current decimal context.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"{field_name} inválido: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError(f"{field_name} inválido: {value!r}") from None
    if not result.is_finite():
        raise InvalidInputError(f"{field_name} inválido: {value!r}")
    context = getcontext()
    if result and not context.Emin <= result.adjusted() <= context.Emax:
        raise InvalidInputError(f"{field_name} fora do intervalo: {value!r}")
    return result


class TransactionService:
    """Execute deposits and withdrawals between customers and companies.

    Parameters
    ----------
    repository : LedgerRepository
        Persistence gateway for customers, companies and transactions.
    dispatcher : NotificationDispatcher | None
        Post-commit notifications. ``None`` disables them.
    config : LedgerConfig | None
        Fee settings (defaults to ``LedgerConfig()``).
    """

    def __init__(
        self,
        repository: LedgerRepository,
        dispatcher: NotificationDispatcher | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        self.repository = repository
        self.dispatcher = dispatcher
        self.config = config or LedgerConfig()

    def calculate_fee(self, company: Company, system_fee: Decimal | None) -> Decimal:
        """Total fee for one transaction against ``company``.

        The administrative share is a percentage of the company's stored
        ``admin_fee_rate``, not of the transaction amount.
        """
        fee = company.admin_fee_rate * self.config.admin_fee_percentage
        if system_fee is not None:
            fee += system_fee
        return fee

    def execute_transaction(
        self,
        customer_cpf: str,
        company_cnpj: str,
        requested_amount: Decimal | str | int | float,
        kind: TransactionKind | str,
        system_fee: Decimal | str | int | float | None = None,
    ) -> Transaction:
        """Move funds between a customer and a company.

        Parameters
        ----------
        customer_cpf : str
            Customer CPF, punctuation allowed.
        company_cnpj : str
            Company CNPJ, punctuation allowed.
        requested_amount : Decimal | str | int | float
            Gross amount, must be positive. Fees are deducted from it.
        kind : TransactionKind | str
            ``"deposito"`` or ``"saque"`` (case-insensitive).
        system_fee : Decimal | str | int | float | None
            Additional fixed fee. When omitted, ``config.default_system_fee``
            applies, which is unset (no fee) by default.

        Returns
        -------
        Transaction
            The committed transaction, with its id assigned.

        Raises
        ------
        InvalidInputError
            Malformed kind or amounts, or a net amount that is not positive.
        EntityNotFoundError
            Unknown customer or company.
        InvalidEntityStateError
            Withdrawal larger than the company balance.
        """
        transaction_kind = TransactionKind.parse(kind)
        amount = to_decimal(requested_amount, "Valor")
        if amount <= 0:
            raise InvalidInputError("Valor da transação deve ser positivo")

        if system_fee is None:
            fee_input = self.config.default_system_fee
        else:
            fee_input = to_decimal(system_fee, "Taxa")
            if fee_input < 0:
                raise InvalidInputError("Taxa de sistema não pode ser negativa")

        customer = self.repository.find_customer_by_cpf(only_digits(customer_cpf))
        company = self.repository.find_company_by_cnpj(only_digits(company_cnpj))

        try:
            fee = self.calculate_fee(company, fee_input)
            net_amount = amount - fee
        except DecimalException:
            raise InvalidInputError(f"Valor {amount} fora do intervalo suportado") from None
        if net_amount <= 0:
            raise InvalidInputError(
                f"Valor {amount} não cobre a taxa de {fee} da transação"
            )

        with self.repository.company_lock(company.cnpj):
            company = self.repository.find_company_by_cnpj(company.cnpj)
            balance = company.balance
            if transaction_kind is TransactionKind.WITHDRAWAL:
                if balance < net_amount:
                    logger.warning(
                        "Withdrawal of %s rejected for company %s (balance %s)",
                        net_amount, company.cnpj, balance,
                    )
                    raise InvalidEntityStateError("Saldo insuficiente na empresa")
                new_balance = balance - net_amount
            else:
                try:
                    new_balance = balance + net_amount
                except DecimalException:
                    raise InvalidInputError(
                        f"Depósito de {net_amount} excede o saldo suportado"
                    ) from None

            transaction = Transaction(
                customer=customer,
                company=company,
                amount=net_amount,
                kind=transaction_kind,
                timestamp=datetime.now(),
                system_fee=fee_input if fee_input is not None else Decimal("0"),
                fee=fee,
                requested_amount=amount,
            )
            committed = self.repository.commit_transaction(transaction, new_balance)

        logger.info(
            "Transaction %s committed: %s of %s (fee %s) customer=%s company=%s balance=%s",
            committed.transaction_id,
            transaction_kind.value,
            net_amount,
            fee,
            customer.cpf,
            company.cnpj,
            new_balance,
            extra={"transaction_id": committed.transaction_id, "cnpj": company.cnpj},
        )

        if self.dispatcher is not None:
            self.dispatcher.dispatch(company, customer, committed)

        return committed

    def list_transactions(self) -> list[Transaction]:
        """Get all committed transactions."""
        return self.repository.list_transactions()
