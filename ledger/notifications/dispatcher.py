"""Fire-and-forget dispatch of post-commit notifications."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable

from ledger.config import LedgerConfig
from ledger.exceptions import NotificationError
from ledger.models import Company, Customer, Transaction
from ledger.notifications.callback import CallbackNotifier
from ledger.notifications.mailer import EmailNotifier

logger = logging.getLogger(__name__)


@dataclass
class DispatchStats:
    """Track notification delivery outcomes."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0


class NotificationDispatcher:
    """Run company callbacks and customer emails on a background pool.

    A failed delivery is logged and counted, never raised: by the time
    notifications run the transaction is already committed.
    """

    def __init__(
        self,
        callback: CallbackNotifier | None = None,
        email: EmailNotifier | None = None,
        max_workers: int = 4,
    ) -> None:
        self.callback = callback
        self.email = email
        self.stats = DispatchStats()
        self._stats_lock = threading.Lock()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="ledger-notify"
        )

    @classmethod
    def from_config(cls, config: LedgerConfig) -> "NotificationDispatcher":
        """Build a dispatcher with both channels enabled."""
        return cls(
            callback=CallbackNotifier(config.callback),
            email=EmailNotifier(config.smtp),
            max_workers=config.notification_workers,
        )

    def dispatch(self, company: Company, customer: Customer, transaction: Transaction) -> list[Future]:
        """Schedule the callback and the email for a committed transaction.

        Returns
        -------
        list[Future]
            One future per scheduled notification; each resolves to True on
            delivery and False on failure.
        """
        futures = []
        if self.callback is not None:
            futures.append(
                self._submit("callback", transaction, self.callback.send, company, transaction)
            )
        if self.email is not None:
            futures.append(self._submit("email", transaction, self.email.send, customer))
        return futures

    def _submit(self, channel: str, transaction: Transaction, send: Callable, *args) -> Future:
        self._count("sent")
        try:
            return self._executor.submit(self._deliver, channel, transaction, send, *args)
        except RuntimeError:
            # executor already shut down
            self._count("failed")
            logger.warning("%s notification dropped for transaction %s: dispatcher is shut down",
                           channel, transaction.transaction_id)
            future: Future = Future()
            future.set_result(False)
            return future

    def _deliver(self, channel: str, transaction: Transaction, send: Callable, *args) -> bool:
        try:
            send(*args)
        except NotificationError as exc:
            self._count("failed")
            logger.warning("%s notification failed for transaction %s: %s",
                           channel, transaction.transaction_id, exc)
            return False
        except Exception:
            self._count("failed")
            logger.exception("Unexpected %s notification error for transaction %s",
                             channel, transaction.transaction_id)
            return False

        self._count("delivered")
        return True

    def _count(self, outcome: str) -> None:
        with self._stats_lock:
            setattr(self.stats, outcome, getattr(self.stats, outcome) + 1)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting notifications, optionally draining pending ones."""
        self._executor.shutdown(wait=wait)
        if self.callback is not None and wait:
            self.callback.close()
        logger.info(
            "Notifications: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
