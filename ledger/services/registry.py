"""Registration and maintenance of customers and companies."""

from decimal import Decimal

from ledger.exceptions import EntityNotFoundError, InvalidInputError
from ledger.logging import get_logger
from ledger.models import Company, Customer
from ledger.services.transaction import to_decimal
from ledger.store import LedgerRepository
from ledger.validators import is_valid_cnpj, is_valid_cpf, only_digits

logger = get_logger(__name__)

_UNSET = object()


class CustomerService:
    """Customer registration with CPF validation."""

    def __init__(self, repository: LedgerRepository) -> None:
        self.repository = repository

    def register(self, cpf: str, email: str | None = None) -> Customer:
        """Validate the CPF and store a new customer.

        Raises
        ------
        InvalidInputError
            If the CPF fails its checksum.
        DuplicateEntityError
            If the CPF is already registered.
        """
        if not is_valid_cpf(cpf):
            logger.warning("Customer registration rejected: invalid CPF")
            raise InvalidInputError("CPF inválido!")

        customer = self.repository.add_customer(
            Customer(cpf=only_digits(cpf), email=email or None)
        )
        logger.info("Customer %s registered", customer.customer_id)
        return customer

    def get(self, customer_id: int) -> Customer:
        return self.repository.get_customer(customer_id)

    def list_all(self) -> list[Customer]:
        customers = self.repository.list_customers()
        if not customers:
            raise EntityNotFoundError("Nenhum cliente encontrado!")
        return customers

    def update(self, customer_id: int, email: str | None) -> Customer:
        """Change a customer's email. The CPF is immutable."""
        customer = self.repository.get_customer(customer_id)
        customer.email = email or None
        return self.repository.save_customer(customer)

    def delete(self, customer_id: int) -> None:
        """Remove a customer without transactions."""
        self.repository.delete_customer(customer_id)
        logger.info("Customer %s deleted", customer_id)


class CompanyService:
    """Company registration with CNPJ validation."""

    def __init__(self, repository: LedgerRepository) -> None:
        self.repository = repository

    def register(
        self,
        cnpj: str,
        balance: Decimal | str | int | float,
        admin_fee_rate: Decimal | str | int | float,
        callback_url: str | None = None,
    ) -> Company:
        """Validate the CNPJ and store a new company.

        Raises
        ------
        InvalidInputError
            If the CNPJ fails its checksum, or balance/fee rate is negative.
        DuplicateEntityError
            If the CNPJ is already registered.
        """
        if not is_valid_cnpj(cnpj):
            logger.warning("Company registration rejected: invalid CNPJ")
            raise InvalidInputError("CNPJ inválido!")

        company = Company(
            cnpj=only_digits(cnpj),
            balance=_non_negative(balance, "Saldo"),
            admin_fee_rate=_non_negative(admin_fee_rate, "Taxa de administração"),
            callback_url=callback_url or None,
        )
        company = self.repository.add_company(company)
        logger.info("Company %s registered with balance %s", company.company_id, company.balance)
        return company

    def get(self, company_id: int) -> Company:
        return self.repository.get_company(company_id)

    def list_all(self) -> list[Company]:
        companies = self.repository.list_companies()
        if not companies:
            raise EntityNotFoundError("Nenhuma empresa encontrada!")
        return companies

    def update(
        self,
        company_id: int,
        admin_fee_rate: Decimal | str | int | float | None = None,
        callback_url: "str | None | object" = _UNSET,
    ) -> Company:
        """Change a company's fee rate or callback URL.

        The balance is not editable here; only transactions change it.
        Pass ``callback_url=None`` to clear the URL.
        """
        company = self.repository.get_company(company_id)
        with self.repository.company_lock(company.cnpj):
            if admin_fee_rate is not None:
                company.admin_fee_rate = _non_negative(admin_fee_rate, "Taxa de administração")
            if callback_url is not _UNSET:
                company.callback_url = callback_url or None
            return self.repository.save_company(company)


def _non_negative(value: object, field_name: str) -> Decimal:
    result = to_decimal(value, field_name)
    if result < 0:
        raise InvalidInputError(f"{field_name} não pode ser negativo")
    return result
