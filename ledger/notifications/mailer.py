"""SMTP email notifier for customers."""

import logging
import smtplib
from email.message import EmailMessage

from ledger.config import SmtpConfig
from ledger.exceptions import NotificationError
from ledger.models import Customer

logger = logging.getLogger(__name__)

SUBJECT = "Transação realizada com sucesso"
BODY = "Sua transação foi realizada com sucesso!"


class EmailNotifier:
    """Send the fixed transaction-confirmation email."""

    def __init__(self, config: SmtpConfig | None = None) -> None:
        self.config = config or SmtpConfig()

    def build_message(self, customer: Customer) -> EmailMessage:
        """Build the confirmation message for a customer."""
        message = EmailMessage()
        message["From"] = self.config.sender
        message["To"] = customer.email
        message["Subject"] = SUBJECT
        message.set_content(BODY)
        return message

    def send(self, customer: Customer) -> None:
        """Send the confirmation email.

        Customers without an email address are skipped.

        Raises
        ------
        NotificationError
            If the SMTP exchange fails.
        """
        if not customer.email:
            logger.warning("Customer %s has no email; confirmation skipped", customer.customer_id)
            return

        message = self.build_message(customer)
        try:
            with smtplib.SMTP(self.config.host, self.config.port, timeout=self.config.timeout) as smtp:
                if self.config.use_starttls:
                    smtp.starttls()
                if self.config.requires_login:
                    smtp.login(self.config.username, self.config.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"Erro ao enviar e-mail para {customer.email}: {exc}") from exc

        logger.debug("Confirmation email sent to customer %s", customer.customer_id)
