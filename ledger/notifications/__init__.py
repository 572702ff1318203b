"""Post-transaction notifications (company callback and customer email)."""

from ledger.notifications.callback import CallbackNotifier
from ledger.notifications.dispatcher import NotificationDispatcher
from ledger.notifications.mailer import EmailNotifier

__all__ = ["CallbackNotifier", "EmailNotifier", "NotificationDispatcher"]
