"""HTTP callback notifier for companies."""

import logging
import threading
from typing import Callable

import requests

from ledger.config import CallbackConfig
from ledger.exceptions import NotificationError
from ledger.models import Company, Transaction
from ledger.serialization import transaction_payload

logger = logging.getLogger(__name__)


class CallbackNotifier:
    """POST committed transactions to the company's registered endpoint.

    Each calling thread gets its own ``requests.Session``, so one notifier
    can be shared by the dispatcher's worker pool.
    """

    def __init__(
        self,
        config: CallbackConfig | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        """Initialize callback notifier.

        Parameters
        ----------
        config : CallbackConfig | None
            Default URL and request timeout.
        session_factory : Callable[[], requests.Session]
            Builds the per-thread session (``requests.Session`` by default).
        """
        self.config = config or CallbackConfig()
        self.session_factory = session_factory
        self._local = threading.local()
        self._sessions: list[requests.Session] = []
        self._sessions_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """Session owned by the current thread, created on first use."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self.session_factory()
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def resolve_url(self, company: Company) -> str | None:
        """Get the callback URL for a company, falling back to the default."""
        return company.callback_url or self.config.default_url

    def send(self, company: Company, transaction: Transaction) -> None:
        """Deliver the transaction payload.

        Raises
        ------
        NotificationError
            If no URL is configured or the request fails.
        """
        url = self.resolve_url(company)
        if not url:
            raise NotificationError(f"Empresa {company.cnpj} sem URL de callback")

        try:
            response = self.session.post(
                url,
                json=transaction_payload(transaction),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NotificationError(
                f"Erro ao enviar callback para a empresa {company.cnpj}: {exc}"
            ) from exc

        logger.debug(
            "Callback delivered to %s for transaction %s (status %d)",
            url,
            transaction.transaction_id,
            response.status_code,
        )

    def close(self) -> None:
        """Close every session opened so far."""
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()
