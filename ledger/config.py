"""Configuration management for the ledger service."""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from ledger.exceptions import ConfigurationError


@dataclass
class SmtpConfig:
    """SMTP transport configuration for customer emails."""

    host: str = "smtp.gmail.com"
    port: int = 587
    username: str = ""
    password: str = ""
    use_starttls: bool = True
    sender: str = "no-reply@ledger.local"
    timeout: float = 10.0

    @property
    def requires_login(self) -> bool:
        """Whether credentials were configured."""
        return bool(self.username)


@dataclass
class CallbackConfig:
    """Outbound HTTP callback configuration."""

    default_url: str | None = None
    timeout: float = 5.0


@dataclass
class LedgerConfig:
    """Main configuration for the ledger service."""

    smtp: SmtpConfig = field(default_factory=SmtpConfig)
    callback: CallbackConfig = field(default_factory=CallbackConfig)
    admin_fee_percentage: Decimal = Decimal("0.02")
    default_system_fee: Decimal | None = None  # applied only when the caller omits the fee
    notification_workers: int = 4
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        smtp = SmtpConfig(
            host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            port=_int_env("SMTP_PORT", 587),
            username=os.getenv("SMTP_USERNAME", ""),
            password=os.getenv("SMTP_PASSWORD", ""),
            use_starttls=os.getenv("SMTP_STARTTLS", "true").lower() == "true",
            sender=os.getenv("SMTP_SENDER", "no-reply@ledger.local"),
            timeout=_float_env("SMTP_TIMEOUT", 10.0),
        )

        callback = CallbackConfig(
            default_url=os.getenv("CALLBACK_DEFAULT_URL") or None,
            timeout=_float_env("CALLBACK_TIMEOUT", 5.0),
        )

        default_fee_str = os.getenv("LEDGER_DEFAULT_SYSTEM_FEE")
        default_system_fee = _decimal(default_fee_str, "LEDGER_DEFAULT_SYSTEM_FEE") if default_fee_str else None

        workers = _int_env("NOTIFICATION_WORKERS", 4)
        if workers < 1:
            raise ConfigurationError("NOTIFICATION_WORKERS must be at least 1")

        return cls(
            smtp=smtp,
            callback=callback,
            default_system_fee=default_system_fee,
            notification_workers=workers,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _decimal(raw: str, name: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{name} must be a decimal, got {raw!r}") from None
